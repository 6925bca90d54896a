import unittest

from components.metrics import posts_per_day
from components.post_list import format_post_date
from data.models import Post, posts_to_frame, sort_newest_first, validate_post_fields


class PostModelTests(unittest.TestCase):
    def test_from_row_ignores_extra_columns_and_stringifies(self):
        post = Post.from_row({"id": 12, "title": "T", "content": None, "created_at": "2024-01-01T00:00:00Z", "user_id": "u", "x": 1})
        self.assertEqual(post.id, "12")
        self.assertEqual(post.content, "")
        self.assertEqual(set(post.as_dict()), {"id", "title", "content", "created_at", "user_id"})

    def test_sort_newest_first_puts_bad_timestamps_last(self):
        posts = [
            Post("a", "a", "", "2024-01-01T00:00:00+00:00", "u"),
            Post("b", "b", "", "not a date", "u"),
            Post("c", "c", "", "2024-03-01T00:00:00.123456+00:00", "u"),
        ]
        self.assertEqual([p.id for p in sort_newest_first(posts)], ["c", "a", "b"])

    def test_validate_post_fields(self):
        self.assertEqual(validate_post_fields("Title", "Body"), [])
        self.assertEqual(validate_post_fields("  ", "Body"), ["Title is required."])
        self.assertEqual(len(validate_post_fields("", "")), 2)

    def test_format_post_date(self):
        self.assertEqual(format_post_date("2024-05-01T23:30:00+00:00"), "2024-05-01")
        self.assertEqual(format_post_date("garbage"), "—")


class PostsPerDayTests(unittest.TestCase):
    def test_counts_by_day(self):
        df = posts_to_frame(
            [
                Post("1", "a", "", "2024-05-01T08:00:00+00:00", "u"),
                Post("2", "b", "", "2024-05-01T09:00:00.5+00:00", "u"),
                Post("3", "c", "", "2024-05-03T09:00:00+00:00", "u"),
            ]
        )
        counts = posts_per_day(df)
        self.assertEqual(counts["day"].tolist(), ["2024-05-01", "2024-05-03"])
        self.assertEqual(counts["posts"].tolist(), [2, 1])

    def test_empty(self):
        self.assertEqual(len(posts_per_day(posts_to_frame([]))), 0)


if __name__ == "__main__":
    unittest.main()
