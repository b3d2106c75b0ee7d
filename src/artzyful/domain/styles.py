"""Style identifiers and the default catalog text."""

GET_NAKED = "get-naked"
FLUFF_AND_FABULOUS = "fluff-and-fabulous"
PURR_MY_BUBBLES = "purr-my-bubbles"

# Canonical order, also the bundle generation order.
STYLE_ORDER: tuple[str, ...] = (GET_NAKED, FLUFF_AND_FABULOUS, PURR_MY_BUBBLES)

PROMPTS_KEY = "prompts"
SITE_CONTENT_KEY = "site-content"

DEFAULT_PROMPTS: dict[str, str] = {
    GET_NAKED: (
        "Transform this into a vintage oil painting of the pet wrapped in a fluffy "
        "white towel with a towel turban on its head, as if it's fresh out of a spa. "
        "Add a marble bathroom background with golden candlelight, subtle steam, and "
        "a foggy mirror. Soft vintage lighting with a cozy, luxurious feel. Keep the "
        "pet's face and pose intact."
    ),
    FLUFF_AND_FABULOUS: (
        "Transform this into a vintage oil painting of the pet lounging in a "
        "clawfoot bathtub, adorned with pearl necklaces, oversized sunglasses, and a "
        "martini glass on the edge of the tub. The scene should have warm vintage "
        "lighting, white marble tiles, and soft pink towels nearby. Keep the pet's "
        "original face and posture. Subtle glam, no photorealism."
    ),
    PURR_MY_BUBBLES: (
        "Transform this into a vintage oil painting of the pet in a bubble bath with "
        "paws up, surrounded by floating bubbles and a rubber duck. Use a light "
        "pastel background with golden fixtures and soft candlelight. Add a vintage "
        "glow and visible bath foam. Keep the pet's real face and expression "
        "untouched."
    ),
}

DEFAULT_SITE_CONTENT: dict[str, object] = {
    "heroTitle": "Transform Your Pet Into Art",
    "heroSubtitle": (
        "Upload your pet's photo and choose from our vintage-inspired styles"
    ),
    "logo": "/images/logo.png",
    "heroImage": "/images/hero-banner.jpg",
    "styleNames": {
        GET_NAKED: "Get Naked",
        FLUFF_AND_FABULOUS: "Fluff & Fabulous",
        PURR_MY_BUBBLES: "Purr My Bubbles",
    },
    "styleDescriptions": {
        GET_NAKED: "Spa day vibes with fluffy towels",
        FLUFF_AND_FABULOUS: "Glamorous bathtub luxury",
        PURR_MY_BUBBLES: "Bubble bath fun with rubber duck",
    },
}


def is_known_style(style: str) -> bool:
    """Return true when the style is part of the fixed catalog."""
    return style in STYLE_ORDER
