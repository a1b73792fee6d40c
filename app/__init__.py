"""Read-side notification service: unread feed, stacked history and read state."""
