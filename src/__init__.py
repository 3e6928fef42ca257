"""Projector v2 - projection screen control service.

This service decides what a projection screen shows during live events:
- Texts (songs, readings) paginated to the display's line limits
- Scenarios (ordered playlists of texts, media, headings and blanks)
- Player state with slide/page and step navigation
"""

__version__ = "0.1.0"
