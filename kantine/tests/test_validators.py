import unittest

from pydantic import ValidationError

from kantine.utilities.validators import WebhookTarget


class TestWebhookTarget(unittest.TestCase):
    def test_accepts_slack_webhook(self):
        target = WebhookTarget(url=" https://hooks.slack.com/services/T000/B000/XXXX ")
        self.assertEqual(target.url, "https://hooks.slack.com/services/T000/B000/XXXX")

    def test_rejects_other_urls(self):
        for url in ("", "http://hooks.slack.com/services/T000", "https://hooks.slack.com/apps/x",
                    "https://example.com/?https://hooks.slack.com/services/"):
            with self.assertRaises(ValidationError):
                WebhookTarget(url=url)


if __name__ == '__main__':
    unittest.main()
