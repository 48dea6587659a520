"""Integration tests for lodging endpoints."""

import pytest
from fastapi.testclient import TestClient

from tests.shared.fixtures.factories import LodgingFactory, days_from_now


class TestLodgingManagement:
    """Tests for admin-only lodging create/update/delete."""

    def test_create_requires_token(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.post(
            f"{api_v1_prefix}/lodgings", json=LodgingFactory.create_payload()
        )

        assert response.status_code == 401

    def test_create_requires_admin(
        self, test_client: TestClient, auth_headers: dict, api_v1_prefix: str
    ):
        response = test_client.post(
            f"{api_v1_prefix}/lodgings",
            headers=auth_headers,
            json=LodgingFactory.create_payload(),
        )

        assert response.status_code == 403

    def test_create(self, lodging: dict):
        assert lodging["id"]
        assert lodging["name"] == "Casa del Mar"
        assert lodging["category"] == "DEPARTMENT"
        assert lodging["price"] == "80.00"
        assert lodging["grade"] == "GOOD"
        assert lodging["checkInTime"] == "15:00:00"
        assert lodging["checkOutTime"] == "11:00:00"

    def test_create_rejects_inverted_window(
        self, test_client: TestClient, admin_headers: dict, api_v1_prefix: str
    ):
        payload = LodgingFactory.create_payload(
            availableFrom=days_from_now(10).isoformat(),
            availableTo=days_from_now(5).isoformat(),
        )

        response = test_client.post(
            f"{api_v1_prefix}/lodgings", headers=admin_headers, json=payload
        )

        assert response.status_code == 400

    def test_create_rejects_unknown_category(
        self, test_client: TestClient, admin_headers: dict, api_v1_prefix: str
    ):
        response = test_client.post(
            f"{api_v1_prefix}/lodgings",
            headers=admin_headers,
            json=LodgingFactory.create_payload(category="CASTLE"),
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_CATEGORY"

    def test_update(
        self,
        test_client: TestClient,
        lodging: dict,
        admin_headers: dict,
        api_v1_prefix: str,
    ):
        response = test_client.patch(
            f"{api_v1_prefix}/lodgings/{lodging['id']}",
            headers=admin_headers,
            json={"stars": 5, "isFavorite": True},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["stars"] == 5
        assert data["isFavorite"] is True
        assert data["name"] == "Casa del Mar"

    def test_update_out_of_range_leaves_lodging_unchanged(
        self,
        test_client: TestClient,
        lodging: dict,
        admin_headers: dict,
        api_v1_prefix: str,
    ):
        response = test_client.patch(
            f"{api_v1_prefix}/lodgings/{lodging['id']}",
            headers=admin_headers,
            json={"name": "Renamed", "averageCustomerRating": 11},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_RATING"
        current = test_client.get(f"{api_v1_prefix}/lodgings/{lodging['id']}")
        assert current.json()["name"] == "Casa del Mar"

    def test_delete(
        self,
        test_client: TestClient,
        lodging: dict,
        admin_headers: dict,
        api_v1_prefix: str,
    ):
        url = f"{api_v1_prefix}/lodgings/{lodging['id']}"

        assert test_client.delete(url, headers=admin_headers).status_code == 204
        assert test_client.get(url).status_code == 404

    def test_delete_unknown(
        self, test_client: TestClient, admin_headers: dict, api_v1_prefix: str
    ):
        response = test_client.delete(
            f"{api_v1_prefix}/lodgings/missing", headers=admin_headers
        )

        assert response.status_code == 404
        assert response.json()["code"] == "LODGING_NOT_FOUND"

    def test_price_is_stored_in_cents(
        self, test_client: TestClient, admin_headers: dict, api_v1_prefix: str
    ):
        """The price returned on create is the price read back later."""
        created = test_client.post(
            f"{api_v1_prefix}/lodgings",
            headers=admin_headers,
            json=LodgingFactory.create_payload(price="10.005"),
        )

        assert created.status_code == 201, created.text
        fetched = test_client.get(f"{api_v1_prefix}/lodgings/{created.json()['id']}")
        assert created.json()["price"] == "10.01"
        assert fetched.json()["price"] == "10.01"

    def test_create_rejects_price_above_maximum(
        self, test_client: TestClient, admin_headers: dict, api_v1_prefix: str
    ):
        response = test_client.post(
            f"{api_v1_prefix}/lodgings",
            headers=admin_headers,
            json=LodgingFactory.create_payload(price="100000"),
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    @pytest.mark.parametrize(
        ("field", "limit"),
        [("name", 255), ("address", 255), ("city", 100), ("country", 100)],
    )
    def test_create_rejects_overlong_text(
        self,
        test_client: TestClient,
        admin_headers: dict,
        api_v1_prefix: str,
        field: str,
        limit: int,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/lodgings",
            headers=admin_headers,
            json=LodgingFactory.create_payload(**{field: "x" * (limit + 1)}),
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"
        assert field in response.json()["detail"]

    def test_photos_and_facilities(
        self,
        test_client: TestClient,
        admin_headers: dict,
        api_v1_prefix: str,
    ):
        payload = LodgingFactory.create_payload(
            photos=[
                {"url": "https://img.example.com/casa-room.jpg"},
                {
                    "url": "https://img.example.com/casa-pool.jpg",
                    "altText": "Pool",
                    "isMain": True,
                    "photoType": "pool",
                },
            ],
            amenities=["WiFi", "wifi", "Pool"],
            roomSizeSquareMeters=32,
            isPetFriendly=True,
        )

        created = test_client.post(
            f"{api_v1_prefix}/lodgings", headers=admin_headers, json=payload
        )

        assert created.status_code == 201, created.text
        data = created.json()
        assert data["displayPhoto"] == "https://img.example.com/casa-pool.jpg"
        assert [p["photoType"] for p in data["photos"]] == ["ROOM", "POOL"]
        assert data["photos"][1]["altText"] == "Pool"
        assert data["amenities"] == ["WiFi", "Pool"]
        assert data["roomSizeSquareMeters"] == 32.0
        assert data["isPetFriendly"] is True
        assert data["hasParking"] is False

        cleared = test_client.patch(
            f"{api_v1_prefix}/lodgings/{data['id']}",
            headers=admin_headers,
            json={"photos": []},
        )

        assert cleared.status_code == 200
        assert cleared.json()["photos"] == []
        assert cleared.json()["displayPhoto"] == ""
        assert cleared.json()["amenities"] == ["WiFi", "Pool"]

    def test_create_rejects_two_main_photos(
        self, test_client: TestClient, admin_headers: dict, api_v1_prefix: str
    ):
        photos = [
            {"url": f"https://img.example.com/{n}.jpg", "isMain": True} for n in (1, 2)
        ]

        response = test_client.post(
            f"{api_v1_prefix}/lodgings",
            headers=admin_headers,
            json=LodgingFactory.create_payload(photos=photos),
        )

        assert response.status_code == 400


class TestLodgingCatalog:
    """Tests for the public lodging listings."""

    def _create(self, client: TestClient, prefix: str, headers: dict, **overrides):
        response = client.post(
            f"{prefix}/lodgings",
            headers=headers,
            json=LodgingFactory.create_payload(**overrides),
        )
        assert response.status_code == 201, response.text
        return response.json()

    def test_list_is_public(
        self, test_client: TestClient, lodging: dict, api_v1_prefix: str
    ):
        response = test_client.get(f"{api_v1_prefix}/lodgings")

        assert response.status_code == 200
        data = response.json()
        assert [item["id"] for item in data["lodgings"]] == [lodging["id"]]
        assert data["statistics"]["total"] == 1
        assert data["statistics"]["averagePrice"] == "80.00"

    def test_empty_list_has_zero_statistics(
        self, test_client: TestClient, api_v1_prefix: str
    ):
        response = test_client.get(f"{api_v1_prefix}/lodgings")

        assert response.status_code == 200
        assert response.json()["lodgings"] == []
        assert response.json()["statistics"]["total"] == 0

    def test_list_paging(
        self,
        test_client: TestClient,
        admin_headers: dict,
        api_v1_prefix: str,
    ):
        for name in ("Casa A", "Casa B", "Casa C"):
            self._create(test_client, api_v1_prefix, admin_headers, name=name)

        response = test_client.get(
            f"{api_v1_prefix}/lodgings", params={"limit": 2, "offset": 1}
        )

        assert response.status_code == 200
        data = response.json()
        assert [item["name"] for item in data["lodgings"]] == ["Casa B", "Casa C"]
        assert data["total"] == 3
        assert data["statistics"]["total"] == 2

    @pytest.mark.parametrize("params", [{"limit": 0}, {"limit": 101}, {"offset": -1}])
    def test_list_rejects_bad_paging(
        self, test_client: TestClient, api_v1_prefix: str, params: dict
    ):
        response = test_client.get(f"{api_v1_prefix}/lodgings", params=params)

        assert response.status_code == 400

    def test_get_by_id(
        self, test_client: TestClient, lodging: dict, api_v1_prefix: str
    ):
        response = test_client.get(f"{api_v1_prefix}/lodgings/{lodging['id']}")

        assert response.status_code == 200
        assert response.json()["id"] == lodging["id"]
        assert response.json()["price"] == "80.00"
        assert response.json()["city"] == "Valencia"

    def test_categories(
        self, test_client: TestClient, lodging: dict, api_v1_prefix: str
    ):
        response = test_client.get(f"{api_v1_prefix}/lodgings/categories")

        assert response.status_code == 200
        counts = {c["name"]: c["count"] for c in response.json()["categories"]}
        assert counts == {
            "HOTEL": 0,
            "HOSTEL": 0,
            "DEPARTMENT": 1,
            "BED_AND_BREAKFAST": 0,
        }

    def test_by_category_accepts_loose_spelling(
        self, test_client: TestClient, lodging: dict, api_v1_prefix: str
    ):
        response = test_client.get(f"{api_v1_prefix}/lodgings/categories/department")

        assert response.status_code == 200
        assert len(response.json()["lodgings"]) == 1

    def test_by_unknown_category(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.get(f"{api_v1_prefix}/lodgings/categories/castle")

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_CATEGORY"

    def test_cities(
        self,
        test_client: TestClient,
        admin_headers: dict,
        api_v1_prefix: str,
    ):
        self._create(test_client, api_v1_prefix, admin_headers, city="Valencia")
        self._create(test_client, api_v1_prefix, admin_headers, city="Porto")
        self._create(test_client, api_v1_prefix, admin_headers, city="Valencia")

        response = test_client.get(f"{api_v1_prefix}/lodgings/cities")

        assert response.status_code == 200
        assert response.json() == ["Porto", "Valencia"]


class TestLodgingSearch:
    """Tests for GET /api/v1/lodgings/search."""

    def _seed(self, client: TestClient, prefix: str, headers: dict) -> None:
        for overrides in (
            {"name": "Casa del Mar"},
            {
                "name": "Gran Hotel",
                "category": "HOTEL",
                "price": "150.00",
                "stars": 5,
                "averageCustomerRating": 9,
                "maxOccupancy": 2,
            },
            {
                "name": "Porto Hostel",
                "city": "Porto",
                "country": "Portugal",
                "category": "HOSTEL",
                "price": "25.00",
                "stars": 2,
                "averageCustomerRating": 6,
                "maxOccupancy": 1,
                "availableTo": days_from_now(30, hour=0).isoformat(),
            },
        ):
            response = client.post(
                f"{prefix}/lodgings",
                headers=headers,
                json=LodgingFactory.create_payload(**overrides),
            )
            assert response.status_code == 201, response.text

    def _names(self, response) -> list[str]:
        assert response.status_code == 200, response.text
        return [item["name"] for item in response.json()["lodgings"]]

    def test_destination_matches_city_or_country_any_case(
        self, test_client: TestClient, admin_headers: dict, api_v1_prefix: str
    ):
        self._seed(test_client, api_v1_prefix, admin_headers)

        by_city = test_client.get(
            f"{api_v1_prefix}/lodgings/search", params={"destination": "valencia"}
        )
        by_country = test_client.get(
            f"{api_v1_prefix}/lodgings/search", params={"destination": "PORTUGAL"}
        )

        assert sorted(self._names(by_city)) == ["Casa del Mar", "Gran Hotel"]
        assert self._names(by_country) == ["Porto Hostel"]

    def test_guests_and_dates(
        self, test_client: TestClient, admin_headers: dict, api_v1_prefix: str
    ):
        self._seed(test_client, api_v1_prefix, admin_headers)
        check_in = days_from_now(60).date().isoformat()
        check_out = days_from_now(63).date().isoformat()

        response = test_client.get(
            f"{api_v1_prefix}/lodgings/search",
            params={"guests": 2, "checkIn": check_in, "checkOut": check_out},
        )

        assert sorted(self._names(response)) == ["Casa del Mar", "Gran Hotel"]

    def test_categories_stars_and_price(
        self, test_client: TestClient, admin_headers: dict, api_v1_prefix: str
    ):
        self._seed(test_client, api_v1_prefix, admin_headers)

        response = test_client.get(
            f"{api_v1_prefix}/lodgings/search",
            params=[
                ("category", "hotel"),
                ("category", "department"),
                ("minStars", 3),
                ("maxPrice", "100"),
            ],
        )

        assert self._names(response) == ["Casa del Mar"]

    def test_sorting_and_statistics(
        self, test_client: TestClient, admin_headers: dict, api_v1_prefix: str
    ):
        self._seed(test_client, api_v1_prefix, admin_headers)

        response = test_client.get(
            f"{api_v1_prefix}/lodgings/search", params={"sortBy": "price_desc"}
        )

        assert self._names(response) == ["Gran Hotel", "Casa del Mar", "Porto Hostel"]
        stats = response.json()["statistics"]
        assert stats["total"] == 3
        assert stats["minPrice"] == "25.00"
        assert stats["maxPrice"] == "150.00"
        assert stats["averagePrice"] == "85.00"
        assert stats["categoryDistribution"] == {
            "DEPARTMENT": 1,
            "HOSTEL": 1,
            "HOTEL": 1,
        }

    def test_no_match_is_empty_list(
        self, test_client: TestClient, admin_headers: dict, api_v1_prefix: str
    ):
        self._seed(test_client, api_v1_prefix, admin_headers)

        response = test_client.get(
            f"{api_v1_prefix}/lodgings/search", params={"destination": "Reykjavik"}
        )

        assert self._names(response) == []
        assert response.json()["statistics"]["total"] == 0

    def test_facility_filters(
        self, test_client: TestClient, admin_headers: dict, api_v1_prefix: str
    ):
        for overrides in (
            {"name": "Casa del Mar", "amenities": ["WiFi"], "hasParking": True},
            {
                "name": "Gran Hotel",
                "amenities": ["wifi", "Spa"],
                "roomSizeSquareMeters": 40,
                "isPetFriendly": True,
            },
            {"name": "Porto Hostel", "roomSizeSquareMeters": 12},
        ):
            response = test_client.post(
                f"{api_v1_prefix}/lodgings",
                headers=admin_headers,
                json=LodgingFactory.create_payload(**overrides),
            )
            assert response.status_code == 201, response.text
        search = f"{api_v1_prefix}/lodgings/search"

        wifi = test_client.get(search, params={"amenity": "WIFI"})
        spa_and_wifi = test_client.get(
            search, params=[("amenity", "spa"), ("amenity", "wifi")]
        )
        parking = test_client.get(search, params={"hasParking": "true"})
        pets = test_client.get(search, params={"isPetFriendly": "true"})
        large = test_client.get(search, params={"minRoomSize": 20})

        assert sorted(self._names(wifi)) == ["Casa del Mar", "Gran Hotel"]
        assert self._names(spa_and_wifi) == ["Gran Hotel"]
        assert self._names(parking) == ["Casa del Mar"]
        assert self._names(pets) == ["Gran Hotel"]
        assert self._names(large) == ["Gran Hotel"]

    @pytest.mark.parametrize("param", ["checkIn", "checkOut"])
    def test_one_sided_date_range(
        self, test_client: TestClient, api_v1_prefix: str, param: str
    ):
        response = test_client.get(
            f"{api_v1_prefix}/lodgings/search", params={param: "2030-05-10"}
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_inverted_dates(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.get(
            f"{api_v1_prefix}/lodgings/search",
            params={"checkIn": "2030-05-10", "checkOut": "2030-05-01"},
        )

        assert response.status_code == 400

    def test_inverted_price_range(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.get(
            f"{api_v1_prefix}/lodgings/search",
            params={"minPrice": "200", "maxPrice": "100"},
        )

        assert response.status_code == 400

    def test_zero_guests(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.get(
            f"{api_v1_prefix}/lodgings/search", params={"guests": 0}
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_unknown_sort(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.get(
            f"{api_v1_prefix}/lodgings/search", params={"sortBy": "cheapest"}
        )

        assert response.status_code == 400
