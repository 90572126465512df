"""This module stores the color palettes and fonts used by the resume templates."""
MODERN_PALETTE = {
    "label": "Modern",
    "primary": "#3b82f6",
    "light": "#eff6ff",
    "dark": "#1e40af",
    "dark_text": "#1e293b",
    "medium_text": "#475569",
    "light_text": "#64748b",
    "sidebar_text": "#e0f2fe",
    "footer_bg": "#f8fafc",
    "font": "Helvetica",
    "bold_font": "Helvetica-Bold",
    "italic_font": "Helvetica-Oblique",
}

CLASSIC_PALETTE = {
    "label": "Classic",
    "primary": "#bfa14a",
    "dark_text": "#222222",
    "light": "#f9f6f2",
    "watermark": "#f5ecd7",
    "rule": "#e0c97f",
    "font": "Times-Roman",
    "bold_font": "Times-Bold",
    "italic_font": "Times-Italic",
}

EXECUTIVE_PALETTE = {
    "label": "Executive",
    "primary": "#009688",
    "accent": "#26a69a",
    "light": "#e0f7fa",
    "white": "#ffffff",
    "dark_text": "#263238",
    "light_text": "#607d8b",
    "chip_bg": "#b2dfdb",
    "chip_text": "#00695c",
    "language_chip_bg": "#80cbc4",
    "language_chip_text": "#004d40",
    "font": "Helvetica",
    "bold_font": "Helvetica-Bold",
}

MINIMALIST_PALETTE = {
    "label": "Minimalist",
    "primary": "#ff9800",
    "light": "#fff3e0",
    "dark_text": "#222222",
    "muted": "#bdbdbd",
    "font": "Helvetica",
    "bold_font": "Helvetica-Bold",
}

CREATIVE_PALETTE = {
    "label": "Creative",
    "primary": "#a21caf",
    "secondary": "#f472b6",
    "tertiary": "#fde68a",
    "dark_text": "#2d033b",
    "light_text": "#a78bfa",
    "white": "#ffffff",
    "font": "Helvetica",
    "bold_font": "Helvetica-Bold",
}

TECHNICAL_PALETTE = {
    "label": "Technical",
    "background": "#181a20",
    "header_bg": "#23272e",
    "block_bg": "#22242a",
    "pattern": "#23272e",
    "green": "#39ff14",
    "yellow": "#ffe600",
    "cyan": "#00fff7",
    "window_red": "#ff5f56",
    "window_yellow": "#ffbd2e",
    "window_green": "#27c93f",
    "font": "Courier",
    "bold_font": "Courier-Bold",
}

PROFESSIONAL_PALETTE = {
    "label": "Professional",
    "dark": "#333333",
    "light": "#f4f4f4",
    "primary": "#ff5722",
    "dark_text": "#111111",
    "medium_text": "#666666",
    "light_text": "#999999",
    "header_text": "#ffffff",
    "header_subtext": "#e0f2fe",
    "font": "Helvetica",
    "bold_font": "Helvetica-Bold",
}

ACADEMIC_PALETTE = {
    "label": "Academic",
    "primary": "#800000",
    "light": "#f8d7da",
    "dark_text": "#333333",
    "medium_text": "#555555",
    "light_text": "#777777",
    "white": "#ffffff",
    "font": "Times-Roman",
    "bold_font": "Times-Bold",
    "italic_font": "Times-Italic",
}

ELEGANT_PALETTE = {
    "label": "Elegant",
    "light": "#e1f5fe",
    "dark": "#01579b",
    "primary": "#ffd54f",
    "dark_text": "#212121",
    "medium_text": "#424242",
    "light_text": "#757575",
    "font": "Times-Roman",
    "bold_font": "Times-Bold",
    "italic_font": "Times-Italic",
}

PALETTES = {
    "modern": MODERN_PALETTE,
    "classic": CLASSIC_PALETTE,
    "executive": EXECUTIVE_PALETTE,
    "minimalist": MINIMALIST_PALETTE,
    "creative": CREATIVE_PALETTE,
    "technical": TECHNICAL_PALETTE,
    "professional": PROFESSIONAL_PALETTE,
    "academic": ACADEMIC_PALETTE,
    "elegant": ELEGANT_PALETTE,
}


def get_palette(name: str) -> dict:
    """get_palette gets the palette for a template

    Args:
        name (str): name of the template

    Raises:
        ValueError: if the name is unknown

    Returns:
        dict: the palette
    """
    if name in PALETTES:
        return PALETTES[name]
    raise ValueError(f"Unknown palette name: {name}")
