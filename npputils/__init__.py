"""Small everyday utilities: colours, encodings, math types, text and line diffs, JSON helpers, environment and process tools."""

__version__ = "0.1.0"