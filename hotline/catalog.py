"""Static catalog of Rajshahi emergency and service contacts."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from .domain import Coordinate, Service

SERVICE_CATALOG: List[Dict[str, Any]] = [
    # National hotlines
    {"id": 1, "title": "National Emergency Number", "subtitle": "জাতীয় জরুরি সেবা (পুলিশ/অ্যাম্বুলেন্স/ফায়ার)", "number": "999", "category": "All", "icon": "./assets/emergency.png", "lat": 24.3686, "lng": 88.6300},  # RMP (Approx)
    {"id": 2, "title": "Fire Service Hotline (General)", "subtitle": "জাতীয় ফায়ার সার্ভিস (ফায়ার/অ্যাম্বুলেন্স)", "number": "102", "category": "All", "icon": "./assets/fire-service.png", "lat": 24.3828, "lng": 88.6019},  # RSH Fire Station
    {"id": 3, "title": "Information Service (a2i)", "subtitle": "সরকারি তথ্য ও সেবা (a2i)", "number": "333", "category": "All", "icon": "./assets/emergency.png", "lat": 24.3638, "lng": 88.6254},  # City Corp (Approx)
    {"id": 4, "title": "Women & Child Helpline", "subtitle": "নারী ও শিশু সহায়তা", "number": "109", "category": "Help", "icon": "./assets/emergency.png"},
    # Rajshahi official numbers
    {"id": 10, "title": "RMP Control Room", "subtitle": "রাজশাহী মেট্রোপলিটন পুলিশ", "number": "0721-774476", "category": "Rajshahi Police", "icon": "./assets/police.png", "lat": 24.3686, "lng": 88.6300},
    {"id": 11, "title": "Rajshahi Fire Service", "subtitle": "ডিভিশনাল কন্ট্রোল রুম", "number": "01730-336655", "category": "Rajshahi Fire", "icon": "./assets/fire-service.png", "lat": 24.3828, "lng": 88.6019},
    {"id": 12, "title": "Rajshahi Medical College (Emergency)", "subtitle": "জরুরি বিভাগ (হসপিটাল)", "number": "0721-772150", "category": "Rajshahi Health", "icon": "./assets/ambulance.png", "lat": 24.3725, "lng": 88.6045},
    {"id": 13, "title": "Civil Surgeon Office", "subtitle": "জেলা স্বাস্থ্য তত্ত্বাবধান", "number": "0721-775678", "category": "Rajshahi Health", "icon": "./assets/emergency.png"},
    {"id": 14, "title": "Rajshahi City Corp. Hotline", "subtitle": "সিটি কর্পোরেশন সেবা", "number": "16105", "category": "Rajshahi Govt.", "icon": "./assets/emergency.png", "lat": 24.3638, "lng": 88.6254},
    {"id": 15, "title": "Rajshahi Palli Bidyut (RBS)", "subtitle": "পবিস সদর দপ্তর হটলাইন", "number": "01769401764", "category": "Rajshahi Electricity", "icon": "./assets/emergency.png"},
    {"id": 16, "title": "Islami Bank Hospital RSH", "subtitle": "ইসলামী ব্যাংক হাসপাতাল", "number": "0721-770965", "category": "Rajshahi Health", "icon": "./assets/ambulance.png", "lat": 24.3682, "lng": 88.5835},
    # Blood banks
    {"id": 201, "title": "Rajshahi Blood Bank & Transfusion Center", "subtitle": "ব্লাড ব্যাংক ও ট্রান্সফিউশন সেন্টার", "number": "01770-807108", "category": "Rajshahi Blood", "icon": "./assets/ambulance.png"},
    {"id": 202, "title": "New Safe Blood Bank", "subtitle": "নিউ সেফ ব্লাড ব্যাংক", "number": "01740-384078", "category": "Rajshahi Blood", "icon": "./assets/ambulance.png"},
    {"id": 203, "title": "Blood Bank, RMC (Shandhani)", "subtitle": "রাজশাহী মেডিকেল কলেজ (সন্ধানী)", "number": "01797-563375", "category": "Rajshahi Blood", "icon": "./assets/ambulance.png", "lat": 24.3725, "lng": 88.6045},
    {"id": 204, "title": "Badhon, RC Unit (Rajshahi College)", "subtitle": "বাঁধন, আর সি ইউনিট (রাজশাহী কলেজ)", "number": "01752-355202", "category": "Rajshahi Blood", "icon": "./assets/ambulance.png", "lat": 24.3664, "lng": 88.6015},
    {"id": 205, "title": "Shah Makhdum Blood Bank", "subtitle": "শাহ মখদুম ব্লাড ব্যাংক", "number": "01775-748777", "category": "Rajshahi Blood", "icon": "./assets/ambulance.png"},
    {"id": 206, "title": "Blood Bank, Red Crescent", "subtitle": "রেড ক্রিসেন্ট রাজশাহী সিটি ইউনিট", "number": "01770-330400", "category": "Rajshahi Blood", "icon": "./assets/ambulance.png"},
    {"id": 207, "title": "Mission Blood Bank", "subtitle": "মিশন হাসপাতাল, রাজশাহী", "number": "01733-845247", "category": "Rajshahi Blood", "icon": "./assets/ambulance.png"},
    {"id": 208, "title": "Badhon, RU Branch (Rajshahi University)", "subtitle": "বাঁধন, রু শাখা (রাজশাহী বিশ্ববিদ্যালয়)", "number": "01764-998353", "category": "Rajshahi Blood", "icon": "./assets/ambulance.png", "lat": 24.3752, "lng": 88.6278},
    # Police station OCs
    {"id": 301, "title": "OC, Boalia Model Police Station", "subtitle": "বোয়ালিয়া মডেল থানা", "number": "01320-061499", "category": "Rajshahi Police", "icon": "./assets/police.png", "lat": 24.3695, "lng": 88.6001},
    {"id": 302, "title": "OC, Motihar Thana", "subtitle": "মতিহার থানা", "number": "01320-061623", "category": "Rajshahi Police", "icon": "./assets/police.png", "lat": 24.3789, "lng": 88.6360},
    {"id": 303, "title": "OC, Rajpara Thana", "subtitle": "রাজপাড়া থানা", "number": "01320-061527", "category": "Rajshahi Police", "icon": "./assets/police.png", "lat": 24.3615, "lng": 88.5830},
    {"id": 304, "title": "OC, Kashiadanga Thana", "subtitle": "কাঁশিয়াডাঙ্গা থানা", "number": "01320-061889", "category": "Rajshahi Police", "icon": "./assets/police.png"},
    {"id": 305, "title": "OC, Chandrima Thana", "subtitle": "চন্দ্রিমা থানা", "number": "01320-061555", "category": "Rajshahi Police", "icon": "./assets/police.png"},
    {"id": 306, "title": "OC, Belpukur Thana", "subtitle": "বেলপুকুর থানা", "number": "01320-061679", "category": "Rajshahi Police", "icon": "./assets/police.png"},
    {"id": 307, "title": "OC, Karnhar Thana", "subtitle": "কর্ণহার থানা", "number": "01320-061939", "category": "Rajshahi Police", "icon": "./assets/police.png"},
    {"id": 308, "title": "OC, Airport Thana", "subtitle": "এয়ারপোর্ট থানা", "number": "01320-061781", "category": "Rajshahi Police", "icon": "./assets/police.png"},
    {"id": 309, "title": "OC, Shah Makhdum Thana", "subtitle": "শাহ মখদুম থানা", "number": "01320-061753", "category": "Rajshahi Police", "icon": "./assets/police.png"},
    {"id": 310, "title": "OC, Poba Thana", "subtitle": "পবা থানা", "number": "01320-061809", "category": "Rajshahi Police", "icon": "./assets/police.png"},
    {"id": 311, "title": "OC, Katakhali Thana", "subtitle": "কাটাখালী থানা", "number": "01320-061651", "category": "Rajshahi Police", "icon": "./assets/police.png"},
    {"id": 312, "title": "OC, Damkura Thana", "subtitle": "দামকুড়া থানা", "number": "01320-061911", "category": "Rajshahi Police", "icon": "./assets/police.png"},
    {"id": 313, "title": "OC, Puthia Police Station", "subtitle": "পুঠিয়া থানা", "number": "01320-122672", "category": "Rajshahi Police", "icon": "./assets/police.png"},
    {"id": 314, "title": "OC, Tanore Police Station", "subtitle": "তানোর থানা", "number": "01320-122620", "category": "Rajshahi Police", "icon": "./assets/police.png"},
    {"id": 315, "title": "OC, Mohanpur Police Station", "subtitle": "মোহনপুর থানা", "number": "01320-122646", "category": "Rajshahi Police", "icon": "./assets/police.png"},
    {"id": 316, "title": "OC, Bagmara Police Station", "subtitle": "বাগমারা থানা", "number": "01320-122698", "category": "Rajshahi Police", "icon": "./assets/police.png"},
    {"id": 317, "title": "OC, Bagha Police Station", "subtitle": "বাঘা থানা", "number": "01320-122724", "category": "Rajshahi Police", "icon": "./assets/police.png"},
    {"id": 318, "title": "OC, Charghat Model Police Station", "subtitle": "চারঘাট মডেল থানা", "number": "01320-122750", "category": "Rajshahi Police", "icon": "./assets/police.png"},
    {"id": 319, "title": "OC, Durgapur Police Station", "subtitle": "দুর্গাপুর থানা", "number": "01320-122724 (Alt)", "category": "Rajshahi Police", "icon": "./assets/police.png"},
    # Ambulance
    {"id": 401, "title": "Rajshahi Ambulance Service (24/7)", "subtitle": "২৪ ঘণ্টা অ্যাম্বুলেন্স সার্ভিস", "number": "01601-129376", "category": "Rajshahi Ambulance", "icon": "./assets/ambulance.png"},
    {"id": 402, "title": "Islami Bank Hospital Ambulance", "subtitle": "ইসলামী ব্যাংক হাসপাতাল অ্যাম্বুলেন্স", "number": "01719-978197", "category": "Rajshahi Ambulance", "icon": "./assets/ambulance.png", "lat": 24.3682, "lng": 88.5835},
    {"id": 403, "title": "Barind Medical College Hospital Ambulance", "subtitle": "বরেন্দ্র মেডিকেল কলেজ হাসপাতাল অ্যাম্বুলেন্স", "number": "01772-564445", "category": "Rajshahi Ambulance", "icon": "./assets/ambulance.png", "lat": 24.3595, "lng": 88.5891},
    {"id": 404, "title": "CDM Ambulance Service", "subtitle": "সিডিএম অ্যাম্বুলেন্স সার্ভিস, লক্ষ্মীপুর", "number": "01845-988898", "category": "Rajshahi Ambulance", "icon": "./assets/ambulance.png"},
    {"id": 405, "title": "Rajshahi Medical College Hospital Ambulance", "subtitle": "রামেক হাসপাতাল অ্যাম্বুলেন্স", "number": "0721-774335", "category": "Rajshahi Ambulance", "icon": "./assets/ambulance.png", "lat": 24.3725, "lng": 88.6045},
    {"id": 406, "title": "Ambulance Service (Private)", "subtitle": "সাধারণ অ্যাম্বুলেন্স (আগের নম্বর)", "number": "01994-999999", "category": "Rajshahi Ambulance", "icon": "./assets/ambulance.png"},
    # Hospitals and clinics
    {"id": 500, "title": "Luxmipi Diagnostic Centre", "subtitle": "সকল টেস্টে ২৫% ছাড়! নির্ভুল রোগ নির্ণয়ে বিশ্বস্ত প্রতিষ্ঠান।", "number": "01860280614", "category": "Rajshahi Hospital", "icon": "./assets/ambulance.png"},
    {"id": 501, "title": "Rajshahi Medical College Hospital (RMC)", "subtitle": "রাজশাহী মেডিকেল কলেজ হাসপাতাল (মূল)", "number": "0721-774335", "category": "Rajshahi Hospital", "icon": "./assets/ambulance.png", "lat": 24.3725, "lng": 88.6045},
    {"id": 502, "title": "Islami Bank Medical College Hospital", "subtitle": "ইসলামী ব্যাংক মেডিকেল কলেজ হাসপাতাল", "number": "01711340582", "category": "Rajshahi Hospital", "icon": "./assets/ambulance.png", "lat": 24.3682, "lng": 88.5835},
    {"id": 503, "title": "Rajshahi Model Hospital", "subtitle": "রাজশাহী মডেল হাসপাতাল", "number": "01773-844844", "category": "Rajshahi Hospital", "icon": "./assets/ambulance.png"},
    {"id": 504, "title": "Popular Diagnostic Center Ltd.", "subtitle": "পপুলার ডায়াগনস্টিক সেন্টার", "number": "09613787811", "category": "Rajshahi Clinic", "icon": "./assets/ambulance.png", "lat": 24.3722, "lng": 88.6059},
    {"id": 505, "title": "Bangladesh Eye Hospital", "subtitle": "বাংলাদেশ আই হাসপাতাল", "number": "09643123123", "category": "Rajshahi Clinic", "icon": "./assets/ambulance.png"},
    {"id": 506, "title": "LABAID Diagnostic Center", "subtitle": "ল্যাবএইড ডায়াগনস্টিক সেন্টার", "number": "01766-661144", "category": "Rajshahi Clinic", "icon": "./assets/ambulance.png", "lat": 24.3719, "lng": 88.6049},
    {"id": 507, "title": "Rajshahi City Hospital", "subtitle": "রাজশাহী সিটি হাসপাতাল", "number": "01318-245082", "category": "Rajshahi Hospital", "icon": "./assets/ambulance.png"},
    {"id": 508, "title": "Rajshahi Royal Hospital & Diagnostic Center", "subtitle": "রাজশাহী রয়্যাল হাসপাতাল", "number": "01762-685090", "category": "Rajshahi Hospital", "icon": "./assets/ambulance.png"},
    {"id": 509, "title": "Amana Hospital Ltd.", "subtitle": "আমেনা হাসপাতাল", "number": "01705-403610", "category": "Rajshahi Hospital", "icon": "./assets/ambulance.png"},
    {"id": 510, "title": "Rajshahi Shishu Hospital", "subtitle": "রাজশাহী শিশু হাসপাতাল", "number": "0721770506", "category": "Rajshahi Hospital", "icon": "./assets/ambulance.png"},
    {"id": 511, "title": "Ibn Sina Diagnostic & Consultation Center", "subtitle": "ইবনে সিনা ডায়াগনস্টিক", "number": "09610009636", "category": "Rajshahi Clinic", "icon": "./assets/ambulance.png", "lat": 24.3670, "lng": 88.5999},
    {"id": 512, "title": "Dolphin Clinic", "subtitle": "ডলফিন ক্লিনিক", "number": "01723-025514", "category": "Rajshahi Clinic", "icon": "./assets/ambulance.png"},
    {"id": 513, "title": "Dr. Kaisar Rahman Chowdhury Hospital", "subtitle": "ডা. কায়সার রহমান চৌধুরী হাসপাতাল", "number": "01711-994292", "category": "Rajshahi Hospital", "icon": "./assets/ambulance.png"},
    {"id": 514, "title": "Kaisar Memorial Hospital", "subtitle": "কায়সার মেমোরিয়াল হাসপাতাল", "number": "01711-484006", "category": "Rajshahi Hospital", "icon": "./assets/ambulance.png"},
    {"id": 515, "title": "Rajshahi Royal Hospital (Main Line)", "subtitle": "রাজশাহী রয়্যাল হাসপাতাল (অফিস)", "number": "0721-771277", "category": "Rajshahi Hospital", "icon": "./assets/ambulance.png"},
    # Banks
    {"id": 701, "title": "Sonali Bank, Main Branch", "subtitle": "সোনালী ব্যাংক, প্রধান শাখা, রাজশাহী", "number": "0721-772123", "category": "Rajshahi Bank", "icon": "./assets/emergency.png"},
    {"id": 702, "title": "Islami Bank, Main Branch", "subtitle": "ইসলামী ব্যাংক, স্টেশন রোড শাখা", "number": "0721-775681", "category": "Rajshahi Bank", "icon": "./assets/emergency.png"},
    {"id": 703, "title": "Dutch-Bangla Bank, Main Branch", "subtitle": "ডাচ-বাংলা ব্যাংক, সাহেব বাজার", "number": "0721-771191", "category": "Rajshahi Bank", "icon": "./assets/emergency.png"},
    {"id": 704, "title": "Agrani Bank, Main Branch", "subtitle": "অগ্রণী ব্যাংক, প্রধান শাখা, রাজশাহী", "number": "0721-775260", "category": "Rajshahi Bank", "icon": "./assets/emergency.png"},
    # Education board
    {"id": 601, "title": "Rajshahi Education Board (General)", "subtitle": "শিক্ষা বোর্ড (সাধারণ)", "number": "0721-776270", "category": "Rajshahi Education", "icon": "./assets/emergency.png", "lat": 24.3601, "lng": 88.6250},
    {"id": 602, "title": "REB Chairman Office", "subtitle": "শিক্ষা বোর্ড চেয়ারম্যানের অফিস", "number": "0247811994", "category": "Rajshahi Education", "icon": "./assets/emergency.png"},
    {"id": 603, "title": "REB Chief Evaluation Officer", "subtitle": "প্রধান মূল্যায়ন অফিসার (মোবাইল)", "number": "01670226000", "category": "Rajshahi Education", "icon": "./assets/emergency.png"},
    {"id": 604, "title": "REB Public Relations Officer", "subtitle": "গণসংযোগ অফিসার (মোবাইল)", "number": "01755023329", "category": "Rajshahi Education", "icon": "./assets/emergency.png"},
    {"id": 605, "title": "Rajshahi Cantonment Board School & College", "subtitle": "ক্যান্টনমেন্ট বোর্ড স্কুল ও কলেজ", "number": "01309126445", "category": "Rajshahi Education", "icon": "./assets/emergency.png"},
    {"id": 606, "title": "REB Model School & College", "subtitle": "শিক্ষা বোর্ড মডেল স্কুল ও কলেজ", "number": "0721-771234", "category": "Rajshahi Education", "icon": "./assets/emergency.png"},
]


def _coordinate(entry: Dict[str, Any]) -> Optional[Coordinate]:
    lat = entry.get("lat")
    lng = entry.get("lng")
    if lat is None or lng is None:
        return None
    return Coordinate(float(lat), float(lng))


def build_services(
    favorite_ids: Iterable[int] = (),
    entries: Optional[List[Dict[str, Any]]] = None,
) -> List[Service]:
    """
    Build the session's service list from the static table.

    Args:
        favorite_ids: Ids currently favorited; the only input for ``is_favorite``.
        entries: Catalog rows, defaults to ``SERVICE_CATALOG``.

    Returns:
        Fresh `Service` objects in catalog order.
    """
    favorites = set(favorite_ids)
    rows = SERVICE_CATALOG if entries is None else entries
    return [
        Service(
            id=int(entry["id"]),
            title=entry["title"],
            subtitle=entry.get("subtitle", ""),
            number=entry["number"],
            category=entry["category"],
            icon=entry.get("icon", ""),
            coordinate=_coordinate(entry),
            is_favorite=int(entry["id"]) in favorites,
        )
        for entry in rows
    ]
