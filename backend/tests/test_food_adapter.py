from dataclasses import replace

import pytest

from tripwise.errors import ProfileConfigurationError
from tripwise.services.recommendation.adapters import food
from tripwise.services.recommendation.profiles import RankingWeights
from tripwise.services.recommendation.results import Restaurant
from tripwise.services.recommendation.search_context import Location, SearchContext


def test_yelp_params_for_budget_beach(beach_budget, search_ctx):
    params = food.to_yelp_params(beach_budget, search_ctx)

    assert params["latitude"] == 15.2993
    assert params["longitude"] == 74.124
    assert params["location"] == "Goa"
    assert params["radius"] == 2000
    assert params["categories"] == "local_flavor,seafood,restaurants"
    assert params["price"] == "1,2"
    assert params["sort_by"] == "best_match"
    assert params["open_now"] is True


def test_luxury_price_levels(beach_luxurious, search_ctx):
    assert food.to_yelp_params(beach_luxurious, search_ctx)["price"] == "3,4"


@pytest.mark.parametrize(
    "weights, sort_by",
    [
        (RankingWeights(price=0.5, rating=0.3, distance=0.2), "best_match"),
        (RankingWeights(price=0.1, rating=0.6, distance=0.3), "rating"),
        (RankingWeights(price=0.2, rating=0.2, distance=0.6), "distance"),
    ],
)
def test_yelp_sort_follows_heaviest_weight(beach_budget, search_ctx, weights, sort_by):
    profile = replace(beach_budget, ranking_weights=weights)
    assert food.to_yelp_params(profile, search_ctx)["sort_by"] == sort_by


def test_unknown_cuisines_pass_through():
    assert food.yelp_categories(["seafood", "peruvian"]) == ["seafood", "peruvian"]
    assert food.yelp_categories([]) == ["restaurants"]


def test_google_places_params(beach_budget, search_ctx):
    params = food.to_google_places_params(beach_budget, search_ctx)

    assert params["location"] == "15.2993,74.124"
    assert params["keyword"] == "local OR seafood OR casual"
    assert params["minprice"] == 1
    assert params["maxprice"] == 2
    assert params["type"] == "restaurant"


def test_google_places_without_coordinates(beach_budget):
    ctx = SearchContext(location=Location(city_name="Goa"))
    assert food.to_google_places_params(beach_budget, ctx)["location"] is None


def test_ranking_scores_price_rating_distance_and_reviews(beach_budget, sample_restaurants):
    ranked = food.rank_restaurants(sample_restaurants, beach_budget)

    assert [r.item.id for r in ranked] == ["R2", "R1"]
    assert ranked[0].score == pytest.approx(1.114)
    assert ranked[1].score == pytest.approx(1.029)


def test_review_bonus_is_capped():
    weights = RankingWeights(price=0, rating=0, distance=0)
    few = Restaurant(id="few", name="Few", price_level=1, review_count=50)
    many = Restaurant(id="many", name="Many", price_level=1, review_count=50_000)

    assert food.score_restaurant(few, weights) == pytest.approx(0.1)
    assert food.score_restaurant(many, weights) == pytest.approx(0.2)


def test_missing_price_level_gets_neutral_score():
    weights = RankingWeights(price=1, rating=0, distance=0)
    assert food.score_restaurant(Restaurant(id="x", name="X"), weights) == pytest.approx(0.5)


def test_price_level_filter(beach_budget):
    restaurants = [
        Restaurant(id="cheap", name="Cheap", price_level=1),
        Restaurant(id="fancy", name="Fancy", price_level=4),
        Restaurant(id="unknown", name="Unknown"),
    ]
    ranked = food.rank_restaurants(restaurants, beach_budget)
    assert {r.item.id for r in ranked} == {"cheap", "unknown"}


def test_ranking_truncates_to_ten(beach_budget):
    restaurants = [
        Restaurant(id=f"R{i}", name=f"Place {i}", rating=3.5 + (i % 4) * 0.3, price_level=1 + i % 2, distance=100 * i)
        for i in range(18)
    ]
    ranked = food.rank_restaurants(restaurants, beach_budget)

    assert len(ranked) == 10
    scores = [r.score for r in ranked]
    assert scores == sorted(scores, reverse=True)


def test_missing_weights_raise(beach_budget, sample_restaurants):
    broken = replace(beach_budget, ranking_weights=None)
    with pytest.raises(ProfileConfigurationError):
        food.rank_restaurants(sample_restaurants, broken)
