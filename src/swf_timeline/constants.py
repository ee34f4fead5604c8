"""Global constants for the application."""

# Movie header defaults
DEFAULT_VERSION = 10  # Flash Player version written into new movies
DEFAULT_FRAME_RATE = 12.0  # Frames per second
DEFAULT_FRAME_SIZE = (0, 0, 11000, 8000)  # Stage bounds in twips (550 x 400 px)

# Text layout
EM_SQUARE = 1024  # Size in twips of the EM square used for glyph coordinates
DEFAULT_FONT_SIZE = 240  # Twips (12pt)

# Environment variables read by config.load_settings()
ENV_LOG_LEVEL = "SWF_TIMELINE_LOG_LEVEL"
ENV_FRAME_RATE = "SWF_TIMELINE_FRAME_RATE"
ENV_FONT_SIZE = "SWF_TIMELINE_FONT_SIZE"
ENV_LINE_SPACING = "SWF_TIMELINE_LINE_SPACING"
