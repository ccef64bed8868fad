# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

import httpx

from fatsecret_fakes import FakeFatSecret, recipe_hit
from nutriclinic.errors import UpstreamError, ValidationError
from nutriclinic.fatsecret.client import DEFAULT_BASE_URL, DEFAULT_PROFILE_URL
from nutriclinic.fatsecret.models import ConsumerCredentials
from nutriclinic.fatsecret.signing import sign
from nutriclinic.recipes.models import DietaryPreferences


class TestFatSecretClient(unittest.TestCase):
    def setUp(self) -> None:
        self.fake = FakeFatSecret()
        self.client = self.fake.client()

    def tearDown(self) -> None:
        self.client.close()

    def test_search_foods_sends_signed_query(self) -> None:
        payload = {
            "foods": {
                "food": [{"food_id": "1", "food_name": "Apple"}, {"food_id": "2", "food_name": "Apple Pie"}],
                "max_results": "10",
                "page_number": "0",
                "total_results": "2",
            }
        }
        self.fake.on("food.search", payload)

        result = self.client.search_foods("apple", max_results=10, page_number=0)
        self.assertEqual(result, payload)

        request = self.fake.requests[-1]
        self.assertEqual(request.method, "GET")
        self.assertEqual(request.content, b"")
        params = self.fake.params()
        self.assertEqual(params["method"], "food.search")
        self.assertEqual(params["search_expression"], "apple")
        self.assertEqual(params["max_results"], "10")
        self.assertEqual(params["page_number"], "0")
        self.assertEqual(params["format"], "json")
        self.assertEqual(params["oauth_consumer_key"], "test-key")
        self.assertEqual(params["oauth_signature_method"], "HMAC-SHA1")
        self.assertEqual(params["oauth_version"], "1.0")
        self.assertTrue(params["oauth_timestamp"].isdigit())

        unsigned = {k: v for k, v in params.items() if k != "oauth_signature"}
        self.assertEqual(params["oauth_signature"], sign("GET", DEFAULT_BASE_URL, unsigned, "test-secret"))

    def test_search_foods_validates_paging(self) -> None:
        with self.assertRaises(ValidationError):
            self.client.search_foods("apple", max_results=0)
        with self.assertRaises(ValidationError):
            self.client.search_foods("apple", max_results=51)
        with self.assertRaises(ValidationError):
            self.client.search_foods("apple", page_number=-1)
        with self.assertRaises(ValidationError):
            self.client.search_foods("  ")
        self.assertEqual(self.fake.requests, [])

    def test_error_envelope_raises_upstream_error(self) -> None:
        self.fake.on("food.get", {"error": {"code": 8, "message": "Invalid signature"}})
        with self.assertRaises(UpstreamError) as ctx:
            self.client.get_food("33691")
        self.assertEqual(ctx.exception.code, 8)
        self.assertIn("Invalid signature", str(ctx.exception))

    def test_http_error_status_raises_upstream_error(self) -> None:
        self.fake.on("recipe.get", {"message": "down"}, status=503)
        with self.assertRaises(UpstreamError) as ctx:
            self.client.get_recipe_details("91")
        self.assertEqual(ctx.exception.status, 503)

    def test_transport_error_is_wrapped(self) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        self.fake.on_raw("food.search", refuse)
        with self.assertRaises(UpstreamError) as ctx:
            self.client.search_foods("apple")
        self.assertIn("connection refused", str(ctx.exception))
        self.assertIsInstance(ctx.exception.__cause__, httpx.ConnectError)

    def test_non_json_body_raises_upstream_error(self) -> None:
        self.fake.on_raw("food.get", lambda request: httpx.Response(200, text="<html>oops</html>"))
        with self.assertRaises(UpstreamError):
            self.client.get_food("1")

    def test_single_recipe_hit_is_normalized_to_list(self) -> None:
        self.fake.on("recipes.search", {"recipes": {"recipe": recipe_hit("7", "Lentil Soup", calories="210")}})
        hits = self.client.search_recipes("soup")
        self.assertEqual(len(hits), 1)
        self.assertEqual(hits[0].recipe_id, "7")
        self.assertEqual(hits[0].calories_per_serving, 210.0)

    def test_no_recipe_hits(self) -> None:
        self.fake.on("recipes.search", {"recipes": {"max_results": "10", "total_results": "0"}})
        self.assertEqual(self.client.search_recipes("nothing"), [])

    def test_recommended_recipes_are_searched_and_filtered(self) -> None:
        self.fake.on(
            "recipes.search",
            {
                "recipes": {
                    "recipe": [
                        recipe_hit("1", "Grilled Chicken Salad", calories="500"),
                        recipe_hit("2", "Vegetable Stir Fry", calories="300"),
                        recipe_hit("3", "Fried Rice", "with egg and peanuts", calories="450"),
                    ]
                }
            },
        )
        prefs = DietaryPreferences.model_validate(
            {
                "preferredIngredients": ["chicken", "rice"],
                "cuisine": "asian",
                "mealType": "dinner",
                "dietaryRestrictions": ["vegetarian"],
                "allergens": ["Peanut"],
                "maxCalories": 600,
            }
        )

        kept = self.client.get_recommended_recipes(prefs)
        self.assertEqual([r.name for r in kept], ["Vegetable Stir Fry"])

        params = self.fake.params()
        self.assertEqual(params["method"], "recipes.search")
        self.assertEqual(params["search_expression"], "chicken rice asian dinner")
        self.assertEqual(params["max_results"], "10")
        self.assertEqual(params["page_number"], "0")

    def test_recipe_details_are_hydrated(self) -> None:
        self.fake.on(
            "recipe.get",
            {
                "recipe": {
                    "recipe_id": "91",
                    "recipe_name": "Baked Salmon",
                    "recipe_description": "Oven baked salmon",
                    "number_of_servings": "2",
                    "preparation_time_min": "10",
                    "cooking_time_min": "25",
                    "serving_sizes": {"serving": {"calories": "367", "serving_size": "1 fillet"}},
                    "ingredients": {"ingredient": [{"ingredient_description": "2 salmon fillets"}]},
                    "directions": {
                        "direction": [
                            {"direction_number": "2", "direction_description": "Bake."},
                            {"direction_number": "1", "direction_description": "Season."},
                        ]
                    },
                }
            },
        )
        detail = self.client.get_recipe_details("91")
        self.assertEqual(self.fake.params()["recipe_id"], "91")
        self.assertEqual(detail.name, "Baked Salmon")
        self.assertEqual(detail.calories_per_serving, 367.0)
        self.assertEqual(detail.preparation_time_min, 10)
        self.assertEqual(detail.cooking_time_min, 25)
        self.assertEqual(detail.ingredients, ["2 salmon fillets"])
        self.assertEqual(detail.directions, ["Season.", "Bake."])

    def test_create_profile_returns_credentials_without_switching(self) -> None:
        self.fake.on("profile.create", {"profile": {"auth_token": "tok", "auth_secret": "sec"}})

        result = self.client.create_profile("user-1")

        request = self.fake.requests[-1]
        self.assertEqual(request.method, "POST")
        self.assertEqual(request.content, b"")
        self.assertEqual(f"{request.url.scheme}://{request.url.host}{request.url.path}", DEFAULT_PROFILE_URL)
        params = self.fake.params()
        self.assertEqual(params["user_id"], "user-1")
        unsigned = {k: v for k, v in params.items() if k != "oauth_signature"}
        self.assertEqual(params["oauth_signature"], sign("POST", DEFAULT_PROFILE_URL, unsigned, "test-secret"))

        self.assertEqual(result.credentials, ConsumerCredentials(key="tok", secret="sec"))
        self.assertEqual(self.client.credential_store.current(), ConsumerCredentials(key="test-key", secret="test-secret"))

    def test_create_profile_reads_top_level_token(self) -> None:
        self.fake.on("profile.create", {"auth_token": "tok2", "auth_secret": "sec2"})
        result = self.client.create_profile("user-2")
        self.assertEqual(result.user_id, "user-2")
        self.assertEqual(result.credentials, ConsumerCredentials(key="tok2", secret="sec2"))

    def test_create_profile_without_token_has_no_credentials(self) -> None:
        self.fake.on("profile.create", {"profile": {"auth_token": "tok"}})
        self.assertIsNone(self.client.create_profile("user-3").credentials)

    def test_rotated_credentials_sign_later_requests(self) -> None:
        self.fake.on("food.get", {"food": {"food_id": "1"}})
        previous = self.client.credential_store.rotate(ConsumerCredentials(key="tok", secret="sec"))
        self.assertEqual(previous.key, "test-key")

        self.client.get_food("1")
        params = self.fake.params()
        self.assertEqual(params["oauth_consumer_key"], "tok")
        unsigned = {k: v for k, v in params.items() if k != "oauth_signature"}
        self.assertEqual(params["oauth_signature"], sign("GET", DEFAULT_BASE_URL, unsigned, "sec"))


if __name__ == "__main__":
    unittest.main()
