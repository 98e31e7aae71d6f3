"""Low level rfc5545 content line reading, parsing and encoding."""
