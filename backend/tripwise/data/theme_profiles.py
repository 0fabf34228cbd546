"""Theme profile table: (theme, sub-theme) → recommendation profile data.

Static reference data loaded into a ProfileCatalog at startup. Keys are
``"{theme}_{sub_theme}"``. Budgets are daily USD amounts; distances are
meters; restaurant price levels use the 1-4 scale shared by Yelp/Google.
"""

THEME_PROFILES: dict[str, dict] = {
    # ---------- Beach ----------
    "beach_budget": {
        "name": "Budget Beach Vacation",
        "budget_range": {"min": 50, "max": 150},
        "hotel_preferences": {
            "star_rating": {"min": 2, "max": 3},
            "amenities": ["wifi", "pool", "beach_access"],
            "distance_max": 1000,
            "distance_anchor": "beach",
            "room_types": ["standard", "economy"],
        },
        "restaurant_preferences": {
            "price_level": {"min": 1, "max": 2},
            "cuisine_types": ["local", "seafood", "casual"],
            "distance_max": 2000,
        },
        "transport_preferences": {
            "comfort_level": "economy",
            "preferred_modes": ["public_transport", "shared_rides", "walk"],
            "prioritize": "cost",
        },
        "activity_categories": ["beach", "water_sports", "local_markets", "free_activities"],
        "ranking_weights": {"price": 0.5, "rating": 0.3, "distance": 0.2},
        "ui_hints": {"primary_color": "#38bdf8", "accent_color": "#fbbf24", "density": "compact"},
        "llm_bias": "Focus on affordable beachfront experiences, local seafood, and budget-friendly water activities.",
    },
    "beach_deluxe": {
        "name": "Deluxe Beach Experience",
        "budget_range": {"min": 200, "max": 500},
        "hotel_preferences": {
            "star_rating": {"min": 4, "max": 4.5},
            "amenities": ["wifi", "pool", "spa", "beach_access", "restaurant", "gym"],
            "distance_max": 500,
            "distance_anchor": "beach",
            "room_types": ["deluxe", "suite", "ocean_view"],
        },
        "restaurant_preferences": {
            "price_level": {"min": 2, "max": 3},
            "cuisine_types": ["seafood", "international", "fine_dining"],
            "distance_max": 5000,
        },
        "transport_preferences": {
            "comfort_level": "comfort",
            "preferred_modes": ["private_car", "taxi", "premium_rides"],
            "prioritize": "convenience",
        },
        "activity_categories": ["beach", "water_sports", "spa", "yacht", "snorkeling"],
        "ranking_weights": {"price": 0.2, "rating": 0.5, "distance": 0.3},
        "ui_hints": {"primary_color": "#0ea5e9", "accent_color": "#f59e0b", "density": "comfortable"},
        "llm_bias": "Emphasize quality beachfront resorts, curated dining, and premium water experiences.",
    },
    "beach_luxurious": {
        "name": "Luxury Beach Paradise",
        "budget_range": {"min": 600, "max": 2000},
        "hotel_preferences": {
            "star_rating": {"min": 5, "max": 5},
            "amenities": ["wifi", "infinity_pool", "spa", "private_beach", "butler", "fine_dining", "concierge"],
            "distance_max": 100,
            "distance_anchor": "beach",
            "room_types": ["presidential_suite", "villa", "penthouse"],
        },
        "restaurant_preferences": {
            "price_level": {"min": 3, "max": 4},
            "cuisine_types": ["fine_dining", "michelin_star", "international", "private_chef"],
            "distance_max": 10000,
        },
        "transport_preferences": {
            "comfort_level": "luxury",
            "preferred_modes": ["private_car", "helicopter", "yacht", "limousine"],
            "prioritize": "exclusivity",
        },
        "activity_categories": ["private_beach", "yacht", "diving", "helicopter_tour", "spa", "wine_tasting"],
        "ranking_weights": {"price": 0.1, "rating": 0.6, "distance": 0.3},
        "ui_hints": {"primary_color": "#0c4a6e", "accent_color": "#d97706", "density": "spacious"},
        "llm_bias": "Focus on ultra-luxury resorts, exclusive experiences, personalized service, and world-class amenities.",
    },
    # ---------- Hill station ----------
    "hillstation_budget": {
        "name": "Budget Mountain Retreat",
        "budget_range": {"min": 40, "max": 120},
        "hotel_preferences": {
            "star_rating": {"min": 2, "max": 3},
            "amenities": ["wifi", "heating", "mountain_view"],
            "distance_max": 5000,
            "distance_anchor": "center",
            "room_types": ["standard", "hostel", "guesthouse"],
        },
        "restaurant_preferences": {
            "price_level": {"min": 1, "max": 2},
            "cuisine_types": ["local", "comfort_food", "cafe"],
            "distance_max": 3000,
        },
        "transport_preferences": {
            "comfort_level": "economy",
            "preferred_modes": ["public_transport", "shared_rides", "hiking"],
            "prioritize": "cost",
        },
        "activity_categories": ["hiking", "nature_walks", "viewpoints", "local_markets", "camping"],
        "ranking_weights": {"price": 0.5, "rating": 0.3, "distance": 0.2},
        "ui_hints": {"primary_color": "#10b981", "accent_color": "#8b5cf6", "density": "compact"},
        "llm_bias": "Highlight affordable mountain lodges, hiking trails, and authentic local experiences.",
    },
    "hillstation_deluxe": {
        "name": "Deluxe Mountain Experience",
        "budget_range": {"min": 180, "max": 450},
        "hotel_preferences": {
            "star_rating": {"min": 4, "max": 4.5},
            "amenities": ["wifi", "heating", "mountain_view", "spa", "fireplace", "restaurant"],
            "distance_max": 3000,
            "distance_anchor": "center",
            "room_types": ["deluxe", "suite", "mountain_view"],
        },
        "restaurant_preferences": {
            "price_level": {"min": 2, "max": 3},
            "cuisine_types": ["local", "international", "organic", "wine_bar"],
            "distance_max": 5000,
        },
        "transport_preferences": {
            "comfort_level": "comfort",
            "preferred_modes": ["private_car", "taxi", "cable_car"],
            "prioritize": "convenience",
        },
        "activity_categories": ["hiking", "spa", "adventure_sports", "wildlife", "scenic_drives"],
        "ranking_weights": {"price": 0.2, "rating": 0.5, "distance": 0.3},
        "ui_hints": {"primary_color": "#059669", "accent_color": "#7c3aed", "density": "comfortable"},
        "llm_bias": "Focus on quality mountain resorts, guided adventures, and wellness activities.",
    },
    "hillstation_luxurious": {
        "name": "Luxury Mountain Escape",
        "budget_range": {"min": 550, "max": 1800},
        "hotel_preferences": {
            "star_rating": {"min": 5, "max": 5},
            "amenities": ["wifi", "heating", "panoramic_view", "spa", "fine_dining", "butler", "private_terrace"],
            "distance_max": 2000,
            "distance_anchor": "center",
            "room_types": ["presidential_suite", "chalet", "villa"],
        },
        "restaurant_preferences": {
            "price_level": {"min": 3, "max": 4},
            "cuisine_types": ["fine_dining", "michelin_star", "farm_to_table", "private_chef"],
            "distance_max": 8000,
        },
        "transport_preferences": {
            "comfort_level": "luxury",
            "preferred_modes": ["private_car", "helicopter", "limousine"],
            "prioritize": "exclusivity",
        },
        "activity_categories": ["helicopter_tour", "private_guides", "spa", "adventure_sports", "wildlife_safari"],
        "ranking_weights": {"price": 0.1, "rating": 0.6, "distance": 0.3},
        "ui_hints": {"primary_color": "#047857", "accent_color": "#6d28d9", "density": "spacious"},
        "llm_bias": "Emphasize exclusive mountain retreats, private experiences, and world-class wellness facilities.",
    },
    # ---------- Business ----------
    "business_budget": {
        "name": "Budget Business Travel",
        "budget_range": {"min": 80, "max": 180},
        "hotel_preferences": {
            "star_rating": {"min": 3, "max": 3.5},
            "amenities": ["wifi", "desk", "business_center", "meeting_rooms"],
            "distance_max": 5000,
            "distance_anchor": "center",
            "room_types": ["standard", "business_room"],
        },
        "restaurant_preferences": {
            "price_level": {"min": 1, "max": 2},
            "cuisine_types": ["fast_casual", "cafe", "international"],
            "distance_max": 2000,
        },
        "transport_preferences": {
            "comfort_level": "economy",
            "preferred_modes": ["public_transport", "taxi", "ride_sharing"],
            "prioritize": "time",
        },
        "activity_categories": ["business_centers", "coworking", "networking_events", "quick_fitness"],
        "ranking_weights": {"price": 0.4, "rating": 0.3, "distance": 0.3},
        "ui_hints": {"primary_color": "#3b82f6", "accent_color": "#64748b", "density": "compact"},
        "llm_bias": "Prioritize convenience, fast wifi, and proximity to business districts.",
    },
    "business_deluxe": {
        "name": "Deluxe Business Travel",
        "budget_range": {"min": 250, "max": 550},
        "hotel_preferences": {
            "star_rating": {"min": 4, "max": 4.5},
            "amenities": ["wifi", "executive_lounge", "business_center", "meeting_rooms", "gym", "restaurant"],
            "distance_max": 3000,
            "distance_anchor": "center",
            "room_types": ["executive", "suite", "business_suite"],
        },
        "restaurant_preferences": {
            "price_level": {"min": 2, "max": 3},
            "cuisine_types": ["international", "fine_dining", "business_lunch"],
            "distance_max": 3000,
        },
        "transport_preferences": {
            "comfort_level": "comfort",
            "preferred_modes": ["private_car", "premium_taxi", "airport_shuttle"],
            "prioritize": "reliability",
        },
        "activity_categories": ["business_centers", "executive_lounges", "golf", "fine_dining", "spa"],
        "ranking_weights": {"price": 0.2, "rating": 0.5, "distance": 0.3},
        "ui_hints": {"primary_color": "#2563eb", "accent_color": "#475569", "density": "comfortable"},
        "llm_bias": "Focus on professional amenities, executive services, and quality business facilities.",
    },
    "business_luxurious": {
        "name": "Luxury Business Travel",
        "budget_range": {"min": 650, "max": 2000},
        "hotel_preferences": {
            "star_rating": {"min": 5, "max": 5},
            "amenities": ["wifi", "executive_lounge", "private_meeting_rooms", "butler", "chauffeur", "concierge"],
            "distance_max": 2000,
            "distance_anchor": "center",
            "room_types": ["presidential_suite", "executive_suite", "penthouse"],
        },
        "restaurant_preferences": {
            "price_level": {"min": 3, "max": 4},
            "cuisine_types": ["fine_dining", "michelin_star", "private_dining"],
            "distance_max": 5000,
        },
        "transport_preferences": {
            "comfort_level": "luxury",
            "preferred_modes": ["private_car", "limousine", "helicopter"],
            "prioritize": "prestige",
        },
        "activity_categories": ["executive_lounges", "private_clubs", "golf", "spa", "fine_dining"],
        "ranking_weights": {"price": 0.1, "rating": 0.6, "distance": 0.3},
        "ui_hints": {"primary_color": "#1e40af", "accent_color": "#334155", "density": "spacious"},
        "llm_bias": "Emphasize executive-level service, privacy, and premium business facilities.",
    },
    # ---------- Nature & wellness ----------
    "nature_wellness_budget": {
        "name": "Budget Wellness Retreat",
        "budget_range": {"min": 60, "max": 150},
        "hotel_preferences": {
            "star_rating": {"min": 2, "max": 3},
            "amenities": ["wifi", "yoga_space", "meditation_area", "organic_food"],
            "distance_max": 2000,
            "distance_anchor": "nature",
            "room_types": ["standard", "shared", "eco_lodge"],
        },
        "restaurant_preferences": {
            "price_level": {"min": 1, "max": 2},
            "cuisine_types": ["vegan", "organic", "local", "healthy"],
            "distance_max": 3000,
        },
        "transport_preferences": {
            "comfort_level": "economy",
            "preferred_modes": ["public_transport", "bicycle", "walk"],
            "prioritize": "eco_friendly",
        },
        "activity_categories": ["yoga", "meditation", "hiking", "nature_walks", "organic_farming"],
        "ranking_weights": {"price": 0.4, "rating": 0.4, "distance": 0.2},
        "ui_hints": {"primary_color": "#22c55e", "accent_color": "#a78bfa", "density": "compact"},
        "llm_bias": "Highlight affordable wellness activities, nature immersion, and holistic experiences.",
    },
    "nature_wellness_deluxe": {
        "name": "Deluxe Wellness Experience",
        "budget_range": {"min": 220, "max": 500},
        "hotel_preferences": {
            "star_rating": {"min": 4, "max": 4.5},
            "amenities": ["wifi", "spa", "yoga_studio", "meditation_center", "organic_restaurant", "wellness_programs"],
            "distance_max": 1000,
            "distance_anchor": "nature",
            "room_types": ["deluxe", "wellness_suite", "nature_view"],
        },
        "restaurant_preferences": {
            "price_level": {"min": 2, "max": 3},
            "cuisine_types": ["organic", "farm_to_table", "vegan", "ayurvedic"],
            "distance_max": 4000,
        },
        "transport_preferences": {
            "comfort_level": "comfort",
            "preferred_modes": ["private_car", "eco_friendly_transport"],
            "prioritize": "comfort",
        },
        "activity_categories": ["spa", "yoga", "meditation", "wellness_programs", "nature_therapy", "hiking"],
        "ranking_weights": {"price": 0.2, "rating": 0.5, "distance": 0.3},
        "ui_hints": {"primary_color": "#16a34a", "accent_color": "#9333ea", "density": "comfortable"},
        "llm_bias": "Focus on quality wellness facilities, holistic treatments, and nature-based healing.",
    },
    "nature_wellness_luxurious": {
        "name": "Luxury Wellness Sanctuary",
        "budget_range": {"min": 600, "max": 2200},
        "hotel_preferences": {
            "star_rating": {"min": 5, "max": 5},
            "amenities": [
                "wifi", "luxury_spa", "yoga_pavilion", "meditation_sanctuary",
                "organic_fine_dining", "wellness_concierge", "private_treatments",
            ],
            "distance_max": 500,
            "distance_anchor": "nature",
            "room_types": ["wellness_suite", "villa", "private_retreat"],
        },
        "restaurant_preferences": {
            "price_level": {"min": 3, "max": 4},
            "cuisine_types": ["organic_fine_dining", "plant_based", "ayurvedic", "private_chef"],
            "distance_max": 6000,
        },
        "transport_preferences": {
            "comfort_level": "luxury",
            "preferred_modes": ["private_car", "helicopter", "eco_luxury_transport"],
            "prioritize": "exclusivity",
        },
        "activity_categories": [
            "luxury_spa", "private_yoga", "meditation_retreats", "wellness_consultations", "nature_immersion",
        ],
        "ranking_weights": {"price": 0.1, "rating": 0.6, "distance": 0.3},
        "ui_hints": {"primary_color": "#15803d", "accent_color": "#7e22ce", "density": "spacious"},
        "llm_bias": "Emphasize world-class wellness facilities, personalized treatments, and transformative experiences.",
    },
    # ---------- Family ----------
    "family_budget": {
        "name": "Budget Family Vacation",
        "budget_range": {"min": 70, "max": 180},
        "hotel_preferences": {
            "star_rating": {"min": 2, "max": 3},
            "amenities": ["wifi", "pool", "kids_club", "family_rooms", "playground"],
            "distance_max": 5000,
            "distance_anchor": "attractions",
            "room_types": ["family_room", "connecting_rooms", "apartment"],
        },
        "restaurant_preferences": {
            "price_level": {"min": 1, "max": 2},
            "cuisine_types": ["family_friendly", "casual", "kids_menu", "international"],
            "distance_max": 2000,
        },
        "transport_preferences": {
            "comfort_level": "economy",
            "preferred_modes": ["public_transport", "family_taxis", "rental_car"],
            "prioritize": "safety",
        },
        "activity_categories": ["theme_parks", "zoos", "playgrounds", "family_activities", "educational"],
        "ranking_weights": {"price": 0.4, "rating": 0.4, "distance": 0.2},
        "ui_hints": {"primary_color": "#f59e0b", "accent_color": "#ec4899", "density": "compact"},
        "llm_bias": "Focus on family-friendly amenities, kid-safe activities, and value-for-money experiences.",
    },
    "family_deluxe": {
        "name": "Deluxe Family Experience",
        "budget_range": {"min": 280, "max": 600},
        "hotel_preferences": {
            "star_rating": {"min": 4, "max": 4.5},
            "amenities": [
                "wifi", "pool", "kids_club", "babysitting", "family_suites", "kids_activities", "water_park",
            ],
            "distance_max": 3000,
            "distance_anchor": "attractions",
            "room_types": ["family_suite", "villa", "interconnecting_rooms"],
        },
        "restaurant_preferences": {
            "price_level": {"min": 2, "max": 3},
            "cuisine_types": ["family_friendly", "international", "kids_menu", "healthy"],
            "distance_max": 4000,
        },
        "transport_preferences": {
            "comfort_level": "comfort",
            "preferred_modes": ["private_car", "family_taxi", "rental_car"],
            "prioritize": "convenience",
        },
        "activity_categories": [
            "theme_parks", "water_parks", "educational_tours", "adventure_activities", "kids_clubs",
        ],
        "ranking_weights": {"price": 0.2, "rating": 0.5, "distance": 0.3},
        "ui_hints": {"primary_color": "#f97316", "accent_color": "#db2777", "density": "comfortable"},
        "llm_bias": "Highlight quality family resorts, supervised activities, and memorable experiences for all ages.",
    },
    "family_luxurious": {
        "name": "Luxury Family Retreat",
        "budget_range": {"min": 700, "max": 2500},
        "hotel_preferences": {
            "star_rating": {"min": 5, "max": 5},
            "amenities": [
                "wifi", "infinity_pool", "kids_club", "nanny_service", "family_villas",
                "teens_lounge", "adventure_center", "spa",
            ],
            "distance_max": 2000,
            "distance_anchor": "attractions",
            "room_types": ["family_villa", "presidential_suite", "multi_bedroom"],
        },
        "restaurant_preferences": {
            "price_level": {"min": 3, "max": 4},
            "cuisine_types": ["fine_dining", "international", "kids_gourmet", "private_dining"],
            "distance_max": 6000,
        },
        "transport_preferences": {
            "comfort_level": "luxury",
            "preferred_modes": ["private_car", "limousine", "private_transfers"],
            "prioritize": "exclusivity",
        },
        "activity_categories": [
            "private_activities", "adventure_parks", "cultural_experiences", "water_sports", "educational_tours",
        ],
        "ranking_weights": {"price": 0.1, "rating": 0.6, "distance": 0.3},
        "ui_hints": {"primary_color": "#ea580c", "accent_color": "#be185d", "density": "spacious"},
        "llm_bias": "Focus on exclusive family experiences, personalized service, and world-class facilities for all ages.",
    },
}
