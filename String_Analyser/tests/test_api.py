import json
from urllib.parse import quote

from django.test import Client, TestCase

from String_Analyser.utils import analyze_string


class StringApiTests(TestCase):
    def setUp(self):
        self.client = Client()

    def create(self, value):
        return self.client.post(
            "/strings",
            data=json.dumps({"value": value}),
            content_type="application/json",
        )

    def test_create_string(self):
        resp = self.create("hello world")
        self.assertEqual(resp.status_code, 201)
        data = resp.json()
        expected = analyze_string("hello world")
        self.assertEqual(data["id"], expected.sha256_hash)
        self.assertEqual(data["value"], "hello world")
        self.assertEqual(data["properties"], expected.as_dict())
        self.assertIn("created_at", data)
        self.assertEqual(set(data), {"id", "value", "properties", "created_at"})

    def test_create_duplicate(self):
        self.create("racecar")
        resp = self.create("racecar")
        self.assertEqual(resp.status_code, 409)
        self.assertEqual(resp.json()["error"], "String already exists in the system")

    def test_create_missing_value(self):
        resp = self.client.post("/strings", data=json.dumps({}), content_type="application/json")
        self.assertEqual(resp.status_code, 400)

    def test_create_empty_value(self):
        self.assertEqual(self.create("").status_code, 400)

    def test_create_non_string_value(self):
        resp = self.create(123)
        self.assertEqual(resp.status_code, 422)
        self.assertIn("value", resp.json())

    def test_get_and_delete_string(self):
        self.create("hello world")
        path = "/strings/" + quote("hello world")

        resp = self.client.get(path)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["value"], "hello world")

        self.assertEqual(self.client.delete(path).status_code, 204)
        resp = self.client.get(path)
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["error"], "String does not exist in the system")
        self.assertEqual(self.client.delete(path).status_code, 404)

    def test_list_with_filters(self):
        for value in ["racecar", "level", "hello world", "noon"]:
            self.create(value)

        resp = self.client.get("/strings", {"is_palindrome": "true", "min_length": 5})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["count"], 2)
        self.assertEqual({item["value"] for item in data["data"]}, {"racecar", "level"})
        self.assertEqual(data["filters_applied"], {"is_palindrome": True, "min_length": 5})

    def test_list_without_filters(self):
        self.create("one")
        self.create("two")
        data = self.client.get("/strings").json()
        self.assertEqual(data["count"], 2)
        self.assertEqual(data["filters_applied"], {})

    def test_list_invalid_params(self):
        self.assertEqual(self.client.get("/strings", {"min_length": "abc"}).status_code, 400)
        self.assertEqual(self.client.get("/strings", {"word_count": "-1"}).status_code, 400)
        self.assertEqual(self.client.get("/strings", {"contains_character": "ab"}).status_code, 400)
        self.assertEqual(self.client.get("/strings", {"is_palindrome": "maybe"}).status_code, 400)
        self.assertEqual(self.client.get("/strings", {"is_palindrome": "yes"}).status_code, 400)

    def test_list_palindrome_false(self):
        self.create("racecar")
        self.create("hello")
        data = self.client.get("/strings", {"is_palindrome": "false"}).json()
        self.assertEqual([item["value"] for item in data["data"]], ["hello"])
        self.assertEqual(data["filters_applied"], {"is_palindrome": False})

    def test_natural_language_filter(self):
        for value in ["racecar", "hello", "a b"]:
            self.create(value)

        resp = self.client.get(
            "/strings/filter-by-natural-language",
            {"query": "all single word palindromic strings"},
        )
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["count"], 1)
        self.assertEqual(data["data"][0]["value"], "racecar")
        self.assertEqual(data["interpreted_query"], {
            "original": "all single word palindromic strings",
            "parsed_filters": {"is_palindrome": True, "word_count": 1},
        })

    def test_natural_language_echoes_raw_query(self):
        self.create("racecar")
        query = "  palindromic strings "
        resp = self.client.get("/strings/filter-by-natural-language", {"query": query})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["interpreted_query"]["original"], query)

    def test_natural_language_unparsable(self):
        resp = self.client.get("/strings/filter-by-natural-language", {"query": "show me everything"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "Unable to parse natural language query")

    def test_natural_language_requires_query(self):
        self.assertEqual(self.client.get("/strings/filter-by-natural-language").status_code, 400)
        self.assertEqual(
            self.client.get("/strings/filter-by-natural-language", {"query": "ab"}).status_code, 400)

    def test_schema_is_served(self):
        resp = self.client.get("/swagger.json")
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(json.loads(resp.content)["paths"])

    def test_schema_documents_nested_record(self):
        schema = json.loads(self.client.get("/swagger.json").content)
        record = schema["definitions"]["StringRecord"]["properties"]
        self.assertEqual(set(record), {"id", "value", "properties", "created_at"})
