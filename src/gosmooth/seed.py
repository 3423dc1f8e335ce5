"""Reference data seeded at startup: locations, places and routes.

Each ``seed_*`` function inserts only the rows whose natural key is missing,
so running them again is a no-op.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from gosmooth.db.models import Location, Place, Route

logger = structlog.get_logger()

_BANGKOK = timezone(timedelta(hours=7))
_ROUTES_CREATED = datetime(2025, 5, 24, 9, 5, tzinfo=_BANGKOK)
_ROUTES_UPDATED = datetime(2025, 5, 25, 17, 30, tzinfo=_BANGKOK)

LOCATION_SEED_DATA: list[dict] = [
    {
        "location_id": "1",
        "name": "กรุงเทพมหานคร",
        "description": "กรุงเทพมหานคร เมืองหลวงและศูนย์กลางทางเศรษฐกิจ การเมือง และวัฒนธรรมของประเทศไทย เต็มไปด้วยวัดและพระบรมมหาราชวังสำคัญอย่างวัดพระแก้ว และแหล่งช็อปปิงทันสมัยเช่น สยามพารากอน พร้อมด้วยระบบขนส่งมวลชนทั้ง BTS, MRT และเรือคลอง",
    },
    {
        "location_id": "2",
        "name": "เชียงใหม่",
        "description": "เชียงใหม่ เมืองใหญ่ในภาคเหนือของไทย มีประวัติศาสตร์ยาวนานกับโบราณสถานอย่างวัดพระสิงห์ และวัดเจดีย์หลวง อยู่ท่ามกลางภูเขาและธรรมชาติ สามารถเที่ยวชมสวนดอกไม้ริมดอยอินทนนท์ และสัมผัสวิถีชีวิตชาวเขาเผ่าต่างๆ",
    },
    {
        "location_id": "3",
        "name": "เชียงราย",
        "description": "เชียงราย จังหวัดชายแดนภาคเหนือ ที่มีสถาปัตยกรรมร่วมสมัยของวัดร่องขุ่น และวัดร่องเสือเต้น อีกทั้งยังเป็นประตูสู่สามเหลี่ยมทองคำ สามารถล่องเรือชมแม่น้ำแม่โขง และขึ้นภูชี้ฟ้าเพื่อชมทะเลหมอก",
    },
    {
        "location_id": "4",
        "name": "บุรีรัมย์",
        "description": "บุรีรัมย์ จังหวัดในภาคอีสานที่มีปราสาทหินพนมรุ้งเป็นแหล่งมรดกทางวัฒนธรรม และสนามฟุตบอลบุรีรัมย์ยูไนเต็ด เป็นศูนย์รวมกีฬาสำคัญ นอกจากนี้ยังมีพิพิธภัณฑ์สถานแสดงเรื่องราวประวัติศาสตร์สุวรรณภูมิ",
    },
    {
        "location_id": "5",
        "name": "อุบลราชธานี",
        "description": "อุบลราชธานี จังหวัดริมแม่น้ำโขง มีประเพณีแห่เทียนพรรษาที่ยิ่งใหญ่ วัดทุ่งศรีเมือง ซีเมตตาธรรมสถาน และเป็นทางผ่านสู่แก่งหินผาฮีในฤดูน้ำหลาก",
    },
    {
        "location_id": "6",
        "name": "ระยอง",
        "description": "ระยอง จังหวัดชายฝั่งทะเลตะวันออก มีชายหาดยอดนิยมอย่างหาดแหลมแม่พิมพ์ เกาะเสม็ด และพิพิธภัณฑ์สัตว์น้ำ สถานตากอากาศที่ผสมผสานเกษตรกรรมกับการท่องเที่ยวทางทะเล",
    },
    {
        "location_id": "7",
        "name": "ชลบุรี",
        "description": "ชลบุรี จังหวัดชายฝั่งทะเลตะวันออก มีเมืองท่องเที่ยวชื่อดังอย่างพัทยา สวนน้ำ และเกาะล้าน นอกจากนี้ยังเป็นศูนย์กลางอุตสาหกรรมและท่าเรือสำคัญของประเทศไทย",
    },
    {
        "location_id": "8",
        "name": "กาญจนบุรี",
        "description": "กาญจนบุรี จังหวัดที่มีประวัติศาสตร์สงครามโลกครั้งที่ 2 กับสะพานข้ามแม่น้ำแคว อุทยานแห่งชาติน้ำตกเอราวัณ และเส้นทางเที่ยวน้ำตกไทรโยคน้อย",
    },
    {
        "location_id": "9",
        "name": "กระบี่",
        "description": "กระบี่ จังหวัดในภาคใต้ที่มีชายหาดขาว เกาะแก่งหินปูนสูงชัน เช่น อ่าวนาง, อ่าวมาหยา รวมถึงอุทยานแห่งชาติหาดนพรัตน์ธารา-หมู่เกาะพีพี",
    },
    {
        "location_id": "10",
        "name": "พังงา",
        "description": "พังงา จังหวัดชายฝั่งอันดามัน มีอ่าวพังงาเกาะเจมส์บอนด์ (เกาะตาปู) ถ้ำลอดเขาพิงกัน และอุทยานแห่งชาติหมู่เกาะสิมิลัน",
    },
    {
        "location_id": "11",
        "name": "สุราษฎร์ธานี",
        "description": "สุราษฎร์ธานี จังหวัดภาคใต้ที่เป็นทางผ่านไปยังเกาะสมุย เกาะพะงัน และเขื่อนเชี่ยวหลาน มีตลาดน้ำและวิถีชีวิตริมแม่น้ำตาปี",
    },
]

PLACE_SEED_DATA: list[dict] = [
    {
        "place_id": "1",
        "name": "คาเฟ่จิม ทอมป์สัน",
        "location_id": "1",
        "description": "คาเฟ่ในพิพิธภัณฑ์ จิม ทอมป์สัน เสิร์ฟกาแฟพิเศษและขนมหวานโฮมเมดในบรรยากาศบ้านไทยโบราณ",
        "category": "Cafe",
        "cover_image": "CoverImage/Jim-Thompson-Silk-Café-1.jpg",
        "highlight_images": [
            "HighlightImages/Jim-Thompson-Silk-Café-1.jpg",
            "HighlightImages/Jim-Thompson-Silk-Café-2.jpg",
            "HighlightImages/Jim-Thompson-Silk-Café-3.jpg",
            "HighlightImages/Jim-Thompson-Silk-Café-4.png",
            "HighlightImages/Jim-Thompson-Silk-Café-5.jpg",
            "HighlightImages/Jim-Thompson-Silk-Café-6.jpg",
        ],
        "rating": 4.3,
        "lat": 13.7491,
        "lng": 100.5282,
        "address": "ถนนพระราม 1 แขวงวังใหม่ เขตปทุมวัน กรุงเทพมหานคร",
        "phone": "02-623-5500",
        "website": "https://jimthompsonrestaurant.com/restaurant/silk-cafe/",
        "hours": "10:00น. - 20:00น. เปิดทุกวัน",
    },
    {
        "place_id": "2",
        "name": "แผงขนมตลาดนัดจตุจักร",
        "location_id": "1",
        "description": "แผงสตรีทฟู้ดภายในตลาดนัดจตุจักรที่รวบรวมขนมและของว่างพื้นเมืองไทย ทั้งกล้วยทอด มันทอด ข้าวเหนียวมะม่วง ปาท่องโก๋ และน้ำผลไม้สดคั้นสด เสิร์ฟร้อน ๆ จากเตา",
        "category": "Food Stall",
        "cover_image": "CoverImage/Chatuchak-Snack-Stall-1.jpg",
        "highlight_images": [
            "HighlightImages/Chatuchak-Snack-Stall-1.jpg",
            "HighlightImages/Chatuchak-Snack-Stall-2.jpg",
            "HighlightImages/Chatuchak-Snack-Stall-3.jpg",
            "HighlightImages/Chatuchak-Snack-Stall-4.jpg",
            "HighlightImages/Chatuchak-Snack-Stall-5.jpg",
        ],
        "rating": 4.0,
        "lat": 13.8,
        "lng": 100.5539,
        "address": "ถนนกำแพงเพชร 2 แขวงจตุจักร เขตจตุจักร กรุงเทพมหานคร",
        "phone": "02-272-8008",
        "website": "https://www.chatuchakmarket.org/",
        "hours": "06:00น. - 18:00น. ศุกร์–อาทิตย์",
    },
    {
        "place_id": "3",
        "name": "ศูนย์อาหารเทอร์มินอล 21",
        "location_id": "1",
        "description": "ศูนย์อาหารภายใน Terminal 21 ชั้น LG มีร้านอาหารไทย จีน ญี่ปุ่น เกาหลี และฟู้ดทรัค ให้เลือกมากกว่า 20 ร้าน",
        "category": "Food Court",
        "cover_image": "CoverImage/Pier-21-Food-Court-1.jpg",
        "highlight_images": [
            "HighlightImages/Pier-21-Food-Court-1.jpg",
            "HighlightImages/Pier-21-Food-Court-2.jpg",
            "HighlightImages/Pier-21-Food-Court-3.jpg",
            "HighlightImages/Pier-21-Food-Court-4.jpg",
            "HighlightImages/Pier-21-Food-Court-5.jpg",
        ],
        "rating": 4.3,
        "lat": 13.7378,
        "lng": 100.5624,
        "address": "88 ถนนสุขุมวิท แขวงคลองเตยเหนือ เขตวัฒนา กรุงเทพมหานคร",
        "phone": "02-108-0808",
        "website": "https://www.terminal21.co.th/",
        "hours": "10:00น. - 22:00น. เปิดทุกวัน",
    },
    {
        "place_id": "4",
        "name": "เส้นทางวิ่งสวนลุมพินี",
        "location_id": "1",
        "description": "เส้นทางวิ่งออกกำลังกายในสวนลุมพินี ระยะทางประมาณ 2.5 กิโลเมตร ล้อมรอบด้วยต้นไม้ใหญ่และทะเลสาบ",
        "category": "Activity",
        "cover_image": "CoverImage/Lumpini-Park-Jogging-Track-1.jpg",
        "highlight_images": [
            "HighlightImages/Lumpini-Park-Jogging-Track-1.jpg",
            "HighlightImages/Lumpini-Park-Jogging-Track-2.jpg",
            "HighlightImages/Lumpini-Park-Jogging-Track-3.jpg",
            "HighlightImages/Lumpini-Park-Jogging-Track-4.jpg",
            "HighlightImages/Lumpini-Park-Jogging-Track-5.png",
        ],
        "rating": 4.0,
        "lat": 13.73,
        "lng": 100.5413,
        "address": "ถนนพระรามที่ 4 แขวงลุมพินี เขตปทุมวัน กรุงเทพมหานคร",
        "phone": "02-252-7006",
        "website": "https://www.tourismthailand.org/Attraction/lumpini-park",
        "hours": "05:00น. - 21:00น. เปิดทุกวัน",
    },
    {
        "place_id": "5",
        "name": "สยามโอเชียนเวิลด์",
        "location_id": "1",
        "description": "พิพิธภัณฑ์สัตว์น้ำใต้ดินขนาดใหญ่ในห้างสยามพารากอน ครอบคลุมพื้นที่กว่า 10,000 ตารางเมตร มีตู้จัดแสดงมากกว่า 30 โซน",
        "category": "Attraction",
        "cover_image": "CoverImage/Siam-Ocean-World-1.jpg",
        "highlight_images": [
            "HighlightImages/Siam-Ocean-World-1.jpg",
            "HighlightImages/Siam-Ocean-World-2.jpg",
            "HighlightImages/Siam-Ocean-World-3.jpg",
            "HighlightImages/Siam-Ocean-World-4.png",
            "HighlightImages/Siam-Ocean-World-5.jpg",
        ],
        "rating": 4.5,
        "lat": 13.7465,
        "lng": 100.5343,
        "address": "991 ถนนพระรามที่ 1 แขวงปทุมวัน เขตปทุมวัน กรุงเทพมหานคร (สยามพารากอน)",
        "phone": "02-610-1111",
        "website": "https://www.siamaquarium.com/",
        "hours": "10:00น. - 21:00น. เปิดทุกวัน",
    },
    {
        "place_id": "6",
        "name": "ยอดดอยอินทนนท์",
        "location_id": "2",
        "description": "The highest peak in Thailand at 2,565 m, with panoramic views over the surrounding misty mountains.",
        "category": "Attraction",
        "cover_image": "CoverImage/Doi-Inthanon-Summit-1.jpg",
        "highlight_images": [
            "HighlightImages/Doi-Inthanon-Summit-1.jpg",
            "HighlightImages/Doi-Inthanon-Summit-2.jpg",
            "HighlightImages/Doi-Inthanon-Summit-3.jpg",
        ],
        "rating": 4.7,
        "lat": 18.587797,
        "lng": 98.486963,
        "address": "ตำบลบ้านหลวง อำเภอจอมทอง จังหวัดเชียงใหม่",
        "phone": "053-286-880",
        "website": "https://doiinthanon099.com/",
        "hours": "06:00น. - 18:00น. เปิดทุกวัน",
    },
    {
        "place_id": "7",
        "name": "น้ำตกวชิรธาร",
        "location_id": "2",
        "description": "A seven‐tiered waterfall with emerald pools, accessible via a short trail from the park road.",
        "category": "Attraction",
        "cover_image": "CoverImage/Wachirathan-Waterfall-1.jpg",
        "highlight_images": [
            "HighlightImages/Wachirathan-Waterfall-1.jpg",
            "HighlightImages/Wachirathan-Waterfall-2.jpg",
            "HighlightImages/Wachirathan-Waterfall-3.jpg",
        ],
        "rating": 4.5,
        "lat": 18.542306,
        "lng": 98.597306,
        "address": "อุทยานแห่งชาติดอยอินทนนท์ อำเภอจอมทอง จังหวัดเชียงใหม่",
        "phone": "053-298-505",
        "website": "https://www.thainationalparks.com/wachirathan-waterfall",
        "hours": "07:00น. - 16:00น. เปิดทุกวัน",
    },
    {
        "place_id": "8",
        "name": "วัดเจดีย์หลวง",
        "location_id": "2",
        "description": "Ruined 14th-century Lanna chedi, once housing the Emerald Buddha, now framed by ancient walls.",
        "category": "Temple",
        "cover_image": "CoverImage/Wat-Chedi-Luang-1.jpg",
        "highlight_images": [
            "HighlightImages/Wat-Chedi-Luang-1.jpg",
            "HighlightImages/Wat-Chedi-Luang-2.jpg",
        ],
        "rating": 4.4,
        "lat": 18.787007,
        "lng": 98.986489,
        "address": "ถนนพระปกเกล้า ตำบลพระสิงห์ อำเภอเมืองเชียงใหม่ จังหวัดเชียงใหม่",
        "phone": "053-278-026",
        "website": "http://www.watchediluang-chiangmai.com/",
        "hours": "08:00น. - 17:00น. เปิดทุกวัน",
    },
    {
        "place_id": "9",
        "name": "วัดพระสิงห์",
        "location_id": "2",
        "description": "Historic Lanna temple enshrining the revered Phra Buddha Sihing statue.",
        "category": "Temple",
        "cover_image": "CoverImage/Wat-Phra-Singh-1.jpg",
        "highlight_images": [
            "HighlightImages/Wat-Phra-Singh-1.jpg",
            "HighlightImages/Wat-Phra-Singh-2.jpg",
        ],
        "rating": 4.6,
        "lat": 18.788534,
        "lng": 98.981353,
        "address": "ถนนสามล้าน ตำบลพระสิงห์ อำเภอเมืองเชียงใหม่ จังหวัดเชียงใหม่",
        "phone": "053-248-128",
        "website": "http://www.watphrasingh-chiangmai.com/",
        "hours": "06:00น. - 18:00น. เปิดทุกวัน",
    },
    {
        "place_id": "10",
        "name": "นิทรรศการวัดร่องขุ่น",
        "location_id": "3",
        "description": "Contemporary art exhibits and sculptural installations within the White Temple complex.",
        "category": "Museum",
        "cover_image": "CoverImage/Wat-Rong-Khun-Exhibits-1.jpeg",
        "highlight_images": [
            "HighlightImages/Wat-Rong-Khun-Exhibits-1.jpeg",
            "HighlightImages/Wat-Rong-Khun-Exhibits-2.jpg",
            "HighlightImages/Wat-Rong-Khun-Exhibits-3.webp",
            "HighlightImages/Wat-Rong-Khun-Exhibits-4.jpg",
            "HighlightImages/Wat-Rong-Khun-Exhibits-5.webp",
        ],
        "rating": 4.8,
        "lat": 19.8247,
        "lng": 99.7633,
        "address": "ตำบลป่าอ้อดอนชัย อำเภอเมืองเชียงราย จังหวัดเชียงราย",
        "phone": "052-079-942",
        "website": "https://www.whitereligion.org/",
        "hours": "08:00น. - 17:00น. เปิดทุกวัน",
    },
    {
        "place_id": "11",
        "name": "จุดถ่ายภาพปราสาทพนมรุ้ง",
        "location_id": "4",
        "description": "The best vantage for capturing the alignment of Khmer gateways atop the extinct volcano.",
        "category": "Attraction",
        "cover_image": "CoverImage/Phanom-Rung-Photo-Point-1.webp",
        "highlight_images": [
            "HighlightImages/Phanom-Rung-Photo-Point-1.webp",
            "HighlightImages/Phanom-Rung-Photo-Point-2.jpg",
            "HighlightImages/Phanom-Rung-Photo-Point-3.webp",
            "HighlightImages/Phanom-Rung-Photo-Point-4.jpg",
            "HighlightImages/Phanom-Rung-Photo-Point-5.jpg",
        ],
        "rating": 4.7,
        "lat": 14.531856,
        "lng": 102.940299,
        "address": "ตำบลตาเป๊ก อำเภอเฉลิมพระเกียรติ จังหวัดบุรีรัมย์",
        "phone": "044-611-397",
        "website": "https://www.phanomrung.go.th/",
        "hours": "04:00น. - 18:30น. เปิดทุกวัน",
    },
    {
        "place_id": "12",
        "name": "ภาพเขียนสีผาแต้ม",
        "location_id": "5",
        "description": "Prehistoric cliff art comprising over 300 red and ochre pictographs along the Mekong River.",
        "category": "Attraction",
        "cover_image": "CoverImage/Pha-Taem-Cliff-Paintings-1.jpg",
        "highlight_images": [
            "HighlightImages/Pha-Taem-Cliff-Paintings-1.jpg",
            "HighlightImages/Pha-Taem-Cliff-Paintings-2.jpg",
            "HighlightImages/Pha-Taem-Cliff-Paintings-3.png",
            "HighlightImages/Pha-Taem-Cliff-Paintings-4.png",
            "HighlightImages/Pha-Taem-Cliff-Paintings-5.png",
        ],
        "rating": 4.6,
        "lat": 15.4213,
        "lng": 105.532,
        "address": "อุทยานแห่งชาติผาแต้ม อำเภอโขงเจียม จังหวัดอุบลราชธานี",
        "phone": "045-239-604",
        "website": "https://www.pha-taem.go.th/",
        "hours": "07:30น. - 16:30น. เปิดทุกวัน",
    },
    {
        "place_id": "13",
        "name": "หาดอ่าวพร้าว",
        "location_id": "6",
        "description": "Secluded west‑facing beach on Ko Samet, famed for calm waters and golden sunsets.",
        "category": "Beach",
        "cover_image": "CoverImage/Ao-Prao-Beach-1.jpg",
        "highlight_images": [
            "HighlightImages/Ao-Prao-Beach-1.jpg",
            "HighlightImages/Ao-Prao-Beach-2.jpg",
        ],
        "rating": 4.5,
        "lat": 12.56778,
        "lng": 101.45472,
        "address": "เกาะเสม็ด ตำบลเพ อำเภอเมืองระยอง จังหวัดระยอง",
        "phone": "038-652-329",
        "website": "https://www.tourismthailand.org/Attraction/ao-prao-beach",
        "hours": "เปิดทุกวัน 24 ชั่วโมง",
    },
    {
        "place_id": "14",
        "name": "สาธิตการแกะสลักไม้",
        "location_id": "7",
        "description": "Live demonstrations of traditional Thai woodcarving within the all‑wood museum.",
        "category": "Activity",
        "cover_image": "CoverImage/Sanctuary-Workshop-1.jpg",
        "highlight_images": [
            "HighlightImages/Sanctuary-Workshop-1.jpg",
            "HighlightImages/Sanctuary-Workshop-2.jpg",
        ],
        "rating": 4.4,
        "lat": 12.97278,
        "lng": 100.88889,
        "address": "ถนนราชดำเนิน ตำบลบางปลาสร้อย อำเภอเมืองชลบุรี จังหวัดชลบุรี",
        "phone": "038-427-200",
        "website": "https://www.chonburicity.go.th/",
        "hours": "09:00น. - 17:00น. เปิดทุกวัน",
    },
    {
        "place_id": "15",
        "name": "น้ำตกเอราวัณ ชั้นที่ 7",
        "location_id": "8",
        "description": "The highest emerald‑green pool of the seven-tiered Erawan Waterfall system.",
        "category": "Attraction",
        "cover_image": "CoverImage/Erawan-Falls-Tier7-1.jpg",
        "highlight_images": [
            "HighlightImages/Erawan-Falls-Tier7-1.jpg",
            "HighlightImages/Erawan-Falls-Tier7-2.jpg",
            "HighlightImages/Erawan-Falls-Tier7-3.jpg",
            "HighlightImages/Erawan-Falls-Tier7-4.jpg",
            "HighlightImages/Erawan-Falls-Tier7-5.jpg",
        ],
        "rating": 4.7,
        "lat": 14.3833,
        "lng": 99.1167,
        "address": "อุทยานแห่งชาติเอราวัณ อำเภอศรีสวัสดิ์ จังหวัดกาญจนบุรี",
        "phone": "034-541-000",
        "website": "https://www.thainationalparks.com/erawan-waterfall",
        "hours": "08:00น. - 15:00น. เปิดทุกวัน",
    },
    {
        "place_id": "16",
        "name": "น้ำตกไทรโยคน้อย",
        "location_id": "8",
        "description": "Popular limestone plunge waterfall located next to the terminus of the Death Railway.",
        "category": "Attraction",
        "cover_image": "CoverImage/Sai-Yok-Noi-Waterfall-1.jpg",
        "highlight_images": [
            "HighlightImages/Sai-Yok-Noi-Waterfall-1.jpg",
            "HighlightImages/Sai-Yok-Noi-Waterfall-2.jpg",
            "HighlightImages/Sai-Yok-Noi-Waterfall-3.jpg",
            "HighlightImages/Sai-Yok-Noi-Waterfall-4.jpg",
            "HighlightImages/Sai-Yok-Noi-Waterfall-5.jpg",
        ],
        "rating": 4.5,
        "lat": 14.41778,
        "lng": 98.74722,
        "address": "ตำบลท่าเสา อำเภอไทรโยค จังหวัดกาญจนบุรี",
        "phone": "034-589-621",
        "website": "https://www.thainationalparks.com/sai-yok-waterfall",
        "hours": "06:00น. - 18:00น. เปิดทุกวัน",
    },
    {
        "place_id": "17",
        "name": "รถไฟข้ามสะพานแม่น้ำแคว",
        "location_id": "8",
        "description": "Heritage train journey across the iconic WWII-era steel bridge in Kanchanaburi.",
        "category": "Activity",
        "cover_image": "CoverImage/River-Kwai-Bridge-Train-Ride-1.jpg",
        "highlight_images": [
            "HighlightImages/River-Kwai-Bridge-Train-Ride-1.jpg",
            "HighlightImages/River-Kwai-Bridge-Train-Ride-2.jpg",
            "HighlightImages/River-Kwai-Bridge-Train-Ride-3.jpg",
            "HighlightImages/River-Kwai-Bridge-Train-Ride-4.jpg",
            "HighlightImages/River-Kwai-Bridge-Train-Ride-5.webp",
        ],
        "rating": 4.6,
        "lat": 14.003611,
        "lng": 99.538333,
        "address": "ตำบลท่ามะขาม อำเภอเมืองกาญจนบุรี จังหวัดกาญจนบุรี",
        "phone": "034-512-414",
        "website": "https://www.railway.co.th/",
        "hours": "09:00น. - 16:00น. เปิดทุกวัน",
    },
    {
        "place_id": "18",
        "name": "อ่าวมาหยา",
        "location_id": "9",
        "description": "World-famous cove with towering cliffs and white sands, featured in The Beach.",
        "category": "Beach",
        "cover_image": "CoverImage/Maya-Bay-1.jpg",
        "highlight_images": [
            "HighlightImages/Maya-Bay-1.jpg",
            "HighlightImages/Maya-Bay-2.jpg",
        ],
        "rating": 4.4,
        "lat": 7.676761,
        "lng": 98.766067,
        "address": "เกาะพีพีเล ตำบลอ่าวนาง อำเภอเมืองกระบี่ จังหวัดกระบี่",
        "phone": "075-620-550",
        "website": "https://www.phiphi.phuket.com/maya-bay.html",
        "hours": "08:00น. - 17:00น. เปิดทุกวัน",
    },
    {
        "place_id": "19",
        "name": "เกาะเจมส์บอนด์",
        "location_id": "10",
        "description": "Limestone karst island (Khao Phing Kan) and Ko Tapu, made famous in The Man with the Golden Gun.",
        "category": "Attraction",
        "cover_image": "CoverImage/James-Bond-Island-1.jpg",
        "highlight_images": [
            "HighlightImages/James-Bond-Island-1.jpg",
            "HighlightImages/James-Bond-Island-2.jpg",
        ],
        "rating": 4.5,
        "lat": 8.283,
        "lng": 98.6,
        "address": "อุทยานแห่งชาติอ่าวพังงา ตำบลเกาะปันหยี อำเภอเมืองพังงา จังหวัดพังงา",
        "phone": "076-481-602",
        "website": "https://www.phangnga.dnp.go.th/",
        "hours": "08:00น. - 17:00น. เปิดทุกวัน",
    },
    {
        "place_id": "20",
        "name": "ล่องเรือทะเลสาบเชี่ยวหลาน",
        "location_id": "11",
        "description": "Scenic guided boat excursions on the 165 km² Rajjaprapha Reservoir beneath towering limestone cliffs.",
        "category": "Activity",
        "cover_image": "CoverImage/Cheow-Lan-Lake-Boat-Tour-1.jpg",
        "highlight_images": [
            "HighlightImages/Cheow-Lan-Lake-Boat-Tour-1.jpg",
            "HighlightImages/Cheow-Lan-Lake-Boat-Tour-2.jpg",
            "HighlightImages/Cheow-Lan-Lake-Boat-Tour-3.jpg",
            "HighlightImages/Cheow-Lan-Lake-Boat-Tour-4.png",
            "HighlightImages/Cheow-Lan-Lake-Boat-Tour-5.png",
        ],
        "rating": 4.8,
        "lat": 8.9184,
        "lng": 98.8154,
        "address": "เขื่อนรัชชประภา อุทยานแห่งชาติเขาสก อำเภอบ้านตาขุน จังหวัดสุราษฎร์ธานี",
        "phone": "077-427-150",
        "website": "https://www.khaosokdoc.com/",
        "hours": "08:00น. - 17:00น. เปิดทุกวัน",
    },
    {
        "place_id": "21",
        "name": "Bangkok National Museum",
        "location_id": "1",
        "description": "พิพิธภัณฑสถานแห่งชาติกรุงเทพฯ บอกเล่าประวัติศาสตร์ไทยผ่านโบราณวัตถุและงานศิลป์",
        "category": "Museum",
        "cover_image": "CoverImage/Bangkok-National-Museum-1.jpg",
        "highlight_images": [
            "HighlightImages/Bangkok-National-Museum-1.jpg",
            "HighlightImages/Bangkok-National-Museum-2.jpg",
            "HighlightImages/Bangkok-National-Museum-3.jpg",
            "HighlightImages/Bangkok-National-Museum-4.jpg",
            "HighlightImages/Bangkok-National-Museum-5.jpg",
        ],
        "rating": 4.2,
        "lat": 13.7579,
        "lng": 100.4951,
        "address": "Na Phra That Rd, Phra Borom Maha Ratchawang, Phra Nakhon, Bangkok 10200",
        "phone": "02-224-1333",
        "website": "https://www.museumthailand.com/Attraction/Bangkok-National-Museum",
        "hours": "09:00น. - 16:00น. ปิดวันจันทร์",
    },
    {
        "place_id": "22",
        "name": "Grand Palace",
        "location_id": "1",
        "description": "พระบรมมหาราชวังเก่าแก่ สถาปัตยกรรมไทยอันวิจิตร และวัดพระศรีรัตนศาสดาราม",
        "category": "Palace",
        "cover_image": "CoverImage/Grand-Palace-1.webp",
        "highlight_images": [
            "HighlightImages/Grand-Palace-1.webp",
            "HighlightImages/Grand-Palace-2.jpg",
            "HighlightImages/Grand-Palace-3.jpg",
            "HighlightImages/Grand-Palace-4.jpg",
            "HighlightImages/Grand-Palace-5.jpg",
        ],
        "rating": 4.7,
        "lat": 13.7500,
        "lng": 100.4913,
        "address": "Na Phra Lan Rd, Phra Nakhon, Bangkok 10200",
        "phone": "02-623-5500",
        "website": "https://www.royalgrandpalace.th/",
        "hours": "08:30น. - 15:30น. เปิดทุกวัน",
    },
    {
        "place_id": "23",
        "name": "Khao San Road",
        "location_id": "1",
        "description": "ถนนคนเดินชื่อดัง แหล่งช็อปปิง ร้านอาหาร และชีวิตกลางคืน",
        "category": "Street",
        "cover_image": "CoverImage/Khao-San-Road-1.jpg",
        "highlight_images": [
            "HighlightImages/Khao-San-Road-1.jpg",
            "HighlightImages/Khao-San-Road-2.jpg",
            "HighlightImages/Khao-San-Road-3.jpg",
            "HighlightImages/Khao-San-Road-4.png",
            "HighlightImages/Khao-San-Road-5.png",
        ],
        "rating": 4.1,
        "lat": 13.7580,
        "lng": 100.4975,
        "address": "Khao San Rd, Talat Yot, Phra Nakhon, Bangkok 10200",
        "phone": "",
        "website": "https://www.khaosanroad.com/",
        "hours": "เปิดทุกวัน 24 ชั่วโมง",
    },
    {
        "place_id": "24",
        "name": "Lumpini Park",
        "location_id": "1",
        "description": "สวนสาธารณะใจกลางเมือง เหมาะสำหรับพักผ่อน เดินเล่น และออกกำลังกาย",
        "category": "Park",
        "cover_image": "CoverImage/Lumpini-Park-1.jpg",
        "highlight_images": [
            "HighlightImages/Lumpini-Park-1.jpg",
            "HighlightImages/Lumpini-Park-2.jpg",
            "HighlightImages/Lumpini-Park-3.jpg",
            "HighlightImages/Lumpini-Park-4.jpg",
            "HighlightImages/Lumpini-Park-5.webp",
        ],
        "rating": 4.5,
        "lat": 13.7300,
        "lng": 100.5418,
        "address": "Rama IV Rd, Pathum Wan, Bangkok 10330",
        "phone": "",
        "website": "https://www.bangkok.go.th/lumpinipark",
        "hours": "05:00น. - 21:00น. เปิดทุกวัน",
    },
    {
        "place_id": "25",
        "name": "MBK Center",
        "location_id": "1",
        "description": "ศูนย์การค้าหรู มีแบรนด์เนม โรงภาพยนตร์ อควาเรียม และศูนย์อาหารระดับพรีเมียม",
        "category": "Shopping Mall",
        "cover_image": "CoverImage/MBK-Center-1.webp",
        "highlight_images": [
            "HighlightImages/MBK-Center-1.webp",
            "HighlightImages/MBK-Center-2.jpg",
            "HighlightImages/MBK-Center-3.jpg",
            "HighlightImages/MBK-Center-4.jpg",
            "HighlightImages/MBK-Center-5.jpg",
        ],
        "rating": 4.2,
        "lat": 13.7461,
        "lng": 100.5298,
        "address": "444 Phaya Thai Rd, Wang Mai, Pathum Wan, Bangkok 10330",
        "phone": "02-620-9000",
        "website": "https://www.mbk-center.co.th/",
        "hours": "10:00น. - 22:00น. ทุกวัน",
    },
    {
        "place_id": "26",
        "name": "Siam Paragon",
        "location_id": "1",
        "description": "ศูนย์การค้าหรู มีแบรนด์เนม โรงภาพยนตร์ อควาเรียม และศูนย์อาหารระดับพรีเมียม",
        "category": "Shopping Mall",
        "cover_image": "CoverImage/Siam-Paragon-1.jpg",
        "highlight_images": [
            "HighlightImages/Siam-Paragon-1.jpg",
            "HighlightImages/Siam-Paragon-2.jpg",
            "HighlightImages/Siam-Paragon-3.jpg",
            "HighlightImages/Siam-Paragon-4.jpg",
            "HighlightImages/Siam-Paragon-5.jpg",
        ],
        "rating": 4.5,
        "lat": 13.7460,
        "lng": 100.5346,
        "address": "991 Rama I Rd, Pathum Wan, Bangkok 10330",
        "phone": "02-610-8000",
        "website": "https://www.siamparagon.co.th/",
        "hours": "10:00น. - 22:00น. ทุกวัน",
    },
    {
        "place_id": "27",
        "name": "Taling Chan Floating Market",
        "location_id": "1",
        "description": "ตลาดน้ำโบราณ ชิมอาหารพื้นบ้านและซื้อของสดจากเรือพาย",
        "category": "Market",
        "cover_image": "CoverImage/Taling-Chan-Floating-Market-1.webp",
        "highlight_images": [
            "HighlightImages/Taling-Chan-Floating-Market-1.webp",
            "HighlightImages/Taling-Chan-Floating-Market-2.jpg",
            "HighlightImages/Taling-Chan-Floating-Market-3.jpg",
            "HighlightImages/Taling-Chan-Floating-Market-4.jpg",
            "HighlightImages/Taling-Chan-Floating-Market-5.png",
        ],
        "rating": 4.3,
        "lat": 13.7948,
        "lng": 100.4605,
        "address": "Khlong Chak Phra, Taling Chan, Bangkok 10170",
        "phone": "02-887-7608",
        "website": "https://www.talingchanfloatingmarket.com/",
        "hours": "08:00น. - 17:00น. เฉพาะวันเสาร์–อาทิตย์",
    },
    {
        "place_id": "28",
        "name": "Terminal 21",
        "location_id": "1",
        "description": "ศูนย์การค้าดีไซน์คอนเซ็ปต์แอร์พอร์ต แต่ละชั้นตกแต่งเป็นเมืองต่างๆ ทั่วโลก",
        "category": "Shopping Mall",
        "cover_image": "CoverImage/Terminal21-1.jpg",
        "highlight_images": [
            "HighlightImages/Terminal21-1.jpg",
            "HighlightImages/Terminal21-2.jpg",
            "HighlightImages/Terminal21-3.jpg",
            "HighlightImages/Terminal21-4.jpg",
            "HighlightImages/Terminal21-5.jpg",
        ],
        "rating": 4.4,
        "lat": 13.7373,
        "lng": 100.5608,
        "address": "88 Sukhumvit Rd, Khlong Toei Nuea, Watthana, Bangkok 10110",
        "phone": "02-006-6000",
        "website": "https://www.terminal21.co.th/",
        "hours": "10:00น. - 22:00น. ทุกวัน",
    },
    {
        "place_id": "29",
        "name": "Victory Monument",
        "location_id": "1",
        "description": "อนุสาวรีย์กลางแยกสำคัญ และเป็นศูนย์รวมรถสาธารณะหลายสาย",
        "category": "Monument",
        "cover_image": "CoverImage/Victory-Monument-1.jpg",
        "highlight_images": [
            "HighlightImages/Victory-Monument-1.jpg",
            "HighlightImages/Victory-Monument-2.jpg",
            "HighlightImages/Victory-Monument-3.jpg",
            "HighlightImages/Victory-Monument-4.jpg",
            "HighlightImages/Victory-Monument-5.jpg",
        ],
        "rating": 4.1,
        "lat": 13.7648,
        "lng": 100.5385,
        "address": "Ratchawithi Rd, Thanon Phetchaburi, Ratchathewi, Bangkok 10400",
        "phone": "",
        "website": "https://www.tourismthailand.org/Attraction/Victory-Monument",
        "hours": "เปิดทุกวัน 24 ชั่วโมง",
    },
    {
        "place_id": "30",
        "name": "Wat Arun",
        "location_id": "1",
        "description": "วัดอรุณราชวราราม ราชวรมหาวิหาร หอปรางค์สูงโดดเด่นริมแม่น้ำเจ้าพระยา",
        "category": "Temple",
        "cover_image": "CoverImage/Wat-Arun-1.jpg",
        "highlight_images": [
            "HighlightImages/Wat-Arun-1.jpg",
            "HighlightImages/Wat-Arun-2.jpg",
            "HighlightImages/Wat-Arun-3.jpg",
            "HighlightImages/Wat-Arun-4.jpg",
            "HighlightImages/Wat-Arun-5.jpg",
        ],
        "rating": 4.6,
        "lat": 13.7437,
        "lng": 100.4880,
        "address": "158 Wang Doem Rd, Wat Arun, Bangkok Yai, Bangkok 10600",
        "phone": "02-891-2185",
        "website": "https://www.watarun.net/",
        "hours": "08:00น. - 18:00น. ทุกวัน",
    },
    {
        "place_id": "31",
        "name": "Wat Phra Kaew",
        "location_id": "1",
        "description": "วัดพระศรีรัตนศาสดาราม ประดิษฐานพระแก้วมรกต ภายในบริเวณพระบรมมหาราชวัง",
        "category": "Temple",
        "cover_image": "CoverImage/Wat-Phra-Kaew-1.jpg",
        "highlight_images": [
            "HighlightImages/Wat-Phra-Kaew-1.jpg",
            "HighlightImages/Wat-Phra-Kaew-2.jpg",
            "HighlightImages/Wat-Phra-Kaew-3.jpg",
            "HighlightImages/Wat-Phra-Kaew-4.jpg",
            "HighlightImages/Wat-Phra-Kaew-5.jpg",
        ],
        "rating": 4.8,
        "lat": 13.7516,
        "lng": 100.4925,
        "address": "Na Phra Lan Rd, Phra Nakhon, Bangkok 10200",
        "phone": "02-622-3295",
        "website": "https://www.watphra-kaew.net/",
        "hours": "08:30น. - 15:30น. ทุกวัน",
    },
    {
        "place_id": "32",
        "name": "Yaowarat Road",
        "location_id": "1",
        "description": "ถนนเยาวราช แหล่งอาหารจีน เย็น–ค่ำ มีร้านอาหารและสตรีทฟู้ดชื่อดัง",
        "category": "Street Food",
        "cover_image": "CoverImage/Yaowarat-Road-1.jpg",
        "highlight_images": [
            "HighlightImages/Yaowarat-Road-1.jpg",
            "HighlightImages/Yaowarat-Road-2.webp",
            "HighlightImages/Yaowarat-Road-3.webp",
            "HighlightImages/Yaowarat-Road-4.webp",
            "HighlightImages/Yaowarat-Road-5.webp",
        ],
        "rating": 4.5,
        "lat": 13.7415,
        "lng": 100.5101,
        "address": "Yaowarat Rd, Samphanthawong, Bangkok 10100",
        "phone": "",
        "website": "https://www.tourismthailand.org/Attraction/Yaowarat-Road",
        "hours": "เปิดทุกวัน 24 ชั่วโมง",
    },
]

ROUTE_SEED_DATA: list[dict] = [
    {"start_loc_id": "1", "end_loc_id": "3", "distance": 0.4, "duration": 6, "cost": 0.0, "transport_mode": "walking"},
    {"start_loc_id": "3", "end_loc_id": "4", "distance": 0.8, "duration": 12, "cost": 20.0, "transport_mode": "boat"},
    {"start_loc_id": "4", "end_loc_id": "5", "distance": 9.4, "duration": 35, "cost": 15.0, "transport_mode": "bus"},
    {"start_loc_id": "5", "end_loc_id": "6", "distance": 8.0, "duration": 30, "cost": 10.0, "transport_mode": "bus"},
    {"start_loc_id": "6", "end_loc_id": "9", "distance": 2.0, "duration": 10, "cost": 17.0, "transport_mode": "MRT"},
]


async def seed_locations(db: AsyncSession) -> int:
    """Insert seed locations missing by ``location_id``. Returns the number inserted."""
    existing = set((await db.execute(select(Location.location_id))).scalars().all())
    inserted = 0
    for row in LOCATION_SEED_DATA:
        if row["location_id"] in existing:
            continue
        db.add(Location(**row))
        inserted += 1
    await db.commit()
    logger.info("seed_locations", inserted=inserted, total=len(LOCATION_SEED_DATA))
    return inserted


async def seed_places(db: AsyncSession) -> int:
    """Insert seed places missing by external ``place_id``. Returns the number inserted."""
    existing = set((await db.execute(select(Place.place_id))).scalars().all())
    inserted = 0
    for row in PLACE_SEED_DATA:
        if row["place_id"] in existing:
            continue
        db.add(Place(**{**row, "highlight_images": list(row["highlight_images"])}))
        inserted += 1
    await db.commit()
    logger.info("seed_places", inserted=inserted, total=len(PLACE_SEED_DATA))
    return inserted


async def seed_routes(db: AsyncSession) -> int:
    """Insert seed routes missing by (start, end, transport mode). Returns the number inserted."""
    result = await db.execute(select(Route.start_loc_id, Route.end_loc_id, Route.transport_mode))
    existing = {tuple(row) for row in result.all()}
    inserted = 0
    for row in ROUTE_SEED_DATA:
        key = (row["start_loc_id"], row["end_loc_id"], row["transport_mode"])
        if key in existing:
            continue
        db.add(Route(**row, created_at=_ROUTES_CREATED, updated_at=_ROUTES_UPDATED))
        inserted += 1
    await db.commit()
    logger.info("seed_routes", inserted=inserted, total=len(ROUTE_SEED_DATA))
    return inserted
