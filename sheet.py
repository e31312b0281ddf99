"""Render month grids as printable PIL images."""

from __future__ import annotations

import logging
import os

from PIL import Image, ImageDraw, ImageFont

from calendar_logic import DAY_ABBR, GRID_WEEKS, Calendar, Day, Month
from settings import load_settings

logger = logging.getLogger(__name__)

_PAD = 4


def _load_font(path: str | None, size: int) -> ImageFont.ImageFont:
    if path:
        try:
            return ImageFont.truetype(path, size)
        except OSError:
            logger.debug("Font %s unavailable, using default", path)
    return ImageFont.load_default(size)


def _fit(draw: ImageDraw.ImageDraw, text: str, font, width: int) -> str:
    """Trim ``text`` with an ellipsis until it fits ``width`` pixels."""
    if draw.textlength(text, font=font) <= width:
        return text
    while text and draw.textlength(text + "...", font=font) > width:
        text = text[:-1]
    return text + "..." if text else ""


def _cell_colors(day: Day, colors: dict) -> tuple[str, str]:
    """Return (date colour, event colour) for a cell."""
    if not day.this_month:
        return colors["muted"], colors["muted"]
    if day.day_of_week == 0:
        return colors["weekend"], colors["event"]
    return colors["text"], colors["event"]


def sheet_size(settings: dict) -> tuple[int, int]:
    """Return the (width, height) in pixels of a rendered month sheet."""
    cw, ch = settings["cell_width"], settings["cell_height"]
    title_h = settings["font_size"] * 3
    header_h = settings["font_size"] * 2
    return cw * 7, title_h + header_h + ch * GRID_WEEKS


def render_month(month: Month, year: int, settings: dict | None = None) -> Image.Image:
    """Return an RGB image of one month: title, weekday header and 6×7 cells."""
    if settings is None:
        settings = load_settings()
    colors = settings["colors"]
    cw, ch = settings["cell_width"], settings["cell_height"]
    size = settings["font_size"]
    title_h, header_h = size * 3, size * 2

    img = Image.new("RGB", sheet_size(settings), colors["background"])
    draw = ImageDraw.Draw(img)
    font = _load_font(settings["font_path"], size)
    title_font = _load_font(settings["font_path"], size * 2)

    # Title, centred on the visible pixels
    title = f"{month.name} {year}"
    bbox = draw.textbbox((0, 0), title, font=title_font)
    x = (img.width - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = (title_h - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), title, fill=colors["text"], font=title_font)

    draw.rectangle((0, title_h, img.width, title_h + header_h), fill=colors["header_bg"])
    for col, abbr in enumerate(DAY_ABBR):
        fg = colors["weekend"] if col == 0 else colors["text"]
        draw.text((col * cw + _PAD, title_h + size // 2), abbr, fill=fg, font=font)

    top = title_h + header_h
    for r, week in enumerate(month.weeks):
        for c, day in enumerate(week):
            x0, y0 = c * cw, top + r * ch
            draw.rectangle((x0, y0, x0 + cw, y0 + ch), outline=colors["grid"])
            date_fg, event_fg = _cell_colors(day, colors)
            draw.text((x0 + _PAD, y0 + _PAD), str(day.date), fill=date_fg, font=font)
            if day.event:
                text = _fit(draw, day.event, font, cw - 2 * _PAD)
                draw.text((x0 + _PAD, y0 + _PAD + size * 2), text, fill=event_fg, font=font)

    return img


def save_sheets(calendar: Calendar, directory: str, settings: dict | None = None) -> list[str]:
    """Write one ``{year}-{MM}.png`` per month into ``directory``; return the paths."""
    if settings is None:
        settings = load_settings()
    os.makedirs(directory, exist_ok=True)
    paths = []
    for month in calendar.months:
        path = os.path.join(directory, f"{calendar.year}-{month.number + 1:02d}.png")
        render_month(month, calendar.year, settings).save(path)
        logger.debug("Wrote %s", path)
        paths.append(path)
    return paths
