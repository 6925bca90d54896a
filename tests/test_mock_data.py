import threading
import time
import unittest
from unittest.mock import patch

from data import mock_data
from data.mock_data import FallbackStore, demo_posts, fixture_posts, get_fallback_store
from data.models import parse_timestamp


class FallbackStoreTests(unittest.TestCase):
    def setUp(self):
        self.store = FallbackStore()

    def test_seeded_with_fixture_posts(self):
        posts = self.store.list_posts()
        self.assertEqual([p.id for p in posts], ["1", "2"])
        self.assertTrue(all(p.user_id == "user-1" for p in posts))

    def test_created_post_is_retrievable_and_listed_first(self):
        created = self.store.create_post("Hello", "World", "user-9")
        self.assertEqual(created.id, "3")
        self.assertEqual(self.store.get_post("3"), created)
        self.assertEqual(self.store.list_posts()[0].id, "3")
        self.assertIsNotNone(parse_timestamp(created.created_at))

    def test_ids_stay_unique_after_delete(self):
        self.store.create_post("a", "a", "u")  # id 3
        self.assertTrue(self.store.delete_post("2"))
        created = self.store.create_post("b", "b", "u")
        ids = [p.id for p in self.store.list_posts()]
        self.assertEqual(created.id, "4")
        self.assertEqual(len(ids), len(set(ids)))

    def test_update_changes_only_given_fields(self):
        before = self.store.get_post("2")
        updated = self.store.update_post("2", {"title": "New title"})
        self.assertEqual(updated.title, "New title")
        self.assertEqual(updated.content, before.content)
        self.assertEqual(updated.id, before.id)
        self.assertEqual(updated.created_at, before.created_at)
        self.assertEqual(self.store.get_post("2"), updated)

    def test_update_ignores_immutable_fields(self):
        before = self.store.get_post("1")
        updated = self.store.update_post("1", {"id": "99", "created_at": "1999-01-01T00:00:00+00:00"})
        self.assertEqual(updated, before)

    def test_update_missing_post_returns_none(self):
        self.assertIsNone(self.store.update_post("404", {"title": "x"}))

    def test_delete_removes_from_listing(self):
        self.assertTrue(self.store.delete_post("1"))
        self.assertNotIn("1", [p.id for p in self.store.list_posts()])
        self.assertFalse(self.store.delete_post("1"))

    def test_listing_is_newest_first(self):
        self.store.create_post("newest", "body", "u")
        stamps = [parse_timestamp(p.created_at) for p in self.store.list_posts()]
        self.assertEqual(stamps, sorted(stamps, reverse=True))

    def test_reset_restores_fixtures(self):
        self.store.create_post("x", "y", "z")
        self.store.delete_post("1")
        self.store.reset()
        self.assertEqual([p.id for p in self.store.list_posts()], ["1", "2"])

    def test_concurrent_creates_get_distinct_ids(self):
        def worker():
            for _ in range(20):
                self.store.create_post("t", "c", "u")

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        ids = [p.id for p in self.store.list_posts()]
        self.assertEqual(len(ids), 82)
        self.assertEqual(len(ids), len(set(ids)))


class DemoPostTests(unittest.TestCase):
    def test_extra_demo_posts_sit_below_fixtures(self):
        store = FallbackStore(extra_posts=3)
        posts = store.list_posts()
        self.assertEqual(len(posts), 5)
        self.assertEqual([p.id for p in posts[:2]], ["1", "2"])
        self.assertEqual(sorted(p.id for p in posts[2:]), ["3", "4", "5"])

    def test_demo_posts_are_deterministic(self):
        a = demo_posts(2, start_id=3)
        b = demo_posts(2, start_id=3)
        self.assertEqual([p.title for p in a], [p.title for p in b])

    def test_second_fixture_is_a_day_older(self):
        first, second = fixture_posts()
        delta = parse_timestamp(first.created_at) - parse_timestamp(second.created_at)
        self.assertEqual(delta.days, 1)


class SingletonTests(unittest.TestCase):
    def test_get_fallback_store_is_shared(self):
        self.assertIs(get_fallback_store(), get_fallback_store())

    def test_concurrent_first_calls_build_one_store(self):
        built = []

        def slow_store(extra_posts=0):
            time.sleep(0.05)
            store = FallbackStore(extra_posts=extra_posts)
            built.append(store)
            return store

        results = []
        with patch.object(mock_data, "_fallback_store", None), patch.object(mock_data, "FallbackStore", side_effect=slow_store):
            threads = [threading.Thread(target=lambda: results.append(mock_data.get_fallback_store())) for _ in range(4)]
            for t in threads:
                t.start()
            for t in threads:
                t.join()

        self.assertEqual(len(built), 1)
        self.assertEqual(len({id(s) for s in results}), 1)


if __name__ == "__main__":
    unittest.main()
