"""Constants shared by the notification tests."""

FORUM_TOPIC = "forum_topic"
BEATMAPSET = "beatmapset"
TOPIC_REPLY = "forum_topic_reply"
