"""
emoji_suggester - keyword to emoji suggestions while typing.

Type a trigger character followed by a keyword (":lov") and get a ranked
list of matching emojis from per-language dictionaries, custom mappings and
your own usage history.
"""

__version__ = "0.1.0"
