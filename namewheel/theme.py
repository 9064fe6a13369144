"""Theme definition for namewheel."""

from textual.theme import Theme

WHEEL_THEME = Theme(
    name="namewheel",
    primary="#cc7700",
    secondary="#334455",
    accent="#445566",
    background="black",
    surface="#111111",
    panel="#333333",
    dark=True,
)

# Export individual colors for use in Python code (e.g., Rich Text styling)
PRIMARY = WHEEL_THEME.primary
