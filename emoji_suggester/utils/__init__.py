# emoji_suggester/utils/__init__.py
# settings persistence and logging helpers
