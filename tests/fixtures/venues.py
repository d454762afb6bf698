"""장소 카탈로그 자산

(id, name, slug, city_id) 튜플. 모든 도시는 COUNTRIES/CITIES에 정의됩니다.
"""

COUNTRIES = [
    (1, "United Kingdom", "united-kingdom", "GB"),
    (2, "Australia", "australia", "AU"),
]

# (id, name, slug, country_id)
CITIES = [
    (10, "London", "london", 1),
    (11, "Windsor", "windsor", 1),
    (20, "Sydney", "sydney", 2),
]

VENUES = [
    (100, "Hop Pole", "hop-pole", 10),
    (101, "Border City Ale House", "border-city-ale-house", 11),
    (102, "City Ale House", "city-ale-house", 10),
    (103, "Downtown Ale Works", "downtown-ale-works", 20),
    (104, "The Phoenix", "the-phoenix", 10),
    (105, "Albion Hotel London", "albion-hotel-london", 10),
    (106, "Pasibus", "pasibus-19-642", 20),
    (107, "O'Neill's", "o-neills", 10),
]
