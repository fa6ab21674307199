"""Tiện ích tạo slug cho tên category."""

import re
import unicodedata


class SlugError(ValueError):
    """Lỗi khi giá trị không chuyển được thành slug."""


def slugify(text: str) -> str:
    """Chuyển tên category thành slug an toàn cho url, giữ nguyên hoa thường."""
    if not isinstance(text, str):
        raise SlugError("Slug source must be a string.")
    normalized = unicodedata.normalize("NFD", text.strip())
    normalized = "".join(ch for ch in normalized if unicodedata.category(ch) != "Mn")
    normalized = re.sub(r"\s+", "-", normalized)
    normalized = re.sub(r"[^A-Za-z0-9-]", "", normalized)
    return re.sub(r"-+", "-", normalized).strip("-")


def get_slugify():
    """Dependency của FastAPI, test có thể thay bằng slugifier khác."""
    return slugify
