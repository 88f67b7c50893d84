import html

from PIL import ImageFont

LABEL = "users"
LABEL_COLOR = "#555"
MESSAGE_RGB = (0x00, 0x7E, 0xC6)
HEIGHT = 20
PADDING_X = 6
FONT_SIZE = 11


class BadgeRenderError(RuntimeError):
    """Raised when a badge cannot be rendered for the given total."""


def load_font():
    try:
        return ImageFont.truetype("DejaVuSans.ttf", FONT_SIZE)
    except OSError:
        return ImageFont.load_default()


FONT = load_font()


def text_width(text: str) -> int:
    return int(round(FONT.getlength(text)))


def rgb_hex(rgb) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def render_users_badge(total: int) -> str:
    """Render a flat "users | <total>" badge as an SVG document."""
    if isinstance(total, bool) or not isinstance(total, int) or total < 0:
        raise BadgeRenderError(f"Cannot render badge for total {total!r}")

    label = html.escape(LABEL)
    message = html.escape(str(total))
    label_w = text_width(LABEL) + PADDING_X * 2
    message_w = text_width(str(total)) + PADDING_X * 2
    width = label_w + message_w
    color = rgb_hex(MESSAGE_RGB)
    text_y = HEIGHT / 2 + 4

    return f'''<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{HEIGHT}" role="img" aria-label="{label}: {message}">
  <title>{label}: {message}</title>
  <linearGradient id="s" x2="0" y2="100%">
    <stop offset="0" stop-color="#bbb" stop-opacity=".1"/>
    <stop offset="1" stop-opacity=".1"/>
  </linearGradient>
  <clipPath id="r">
    <rect width="{width}" height="{HEIGHT}" rx="3" fill="#fff"/>
  </clipPath>
  <g clip-path="url(#r)">
    <rect width="{label_w}" height="{HEIGHT}" fill="{LABEL_COLOR}"/>
    <rect x="{label_w}" width="{message_w}" height="{HEIGHT}" fill="{color}"/>
    <rect width="{width}" height="{HEIGHT}" fill="url(#s)"/>
  </g>
  <g fill="#fff" text-anchor="middle" font-family="DejaVu Sans,Verdana,Geneva,sans-serif" font-size="{FONT_SIZE}">
    <text x="{label_w / 2}" y="{text_y}">{label}</text>
    <text x="{label_w + message_w / 2}" y="{text_y}">{message}</text>
  </g>
</svg>
'''
