from PIL import Image, ImageDraw

MISSING_COLOR = "#9ca3af"


class SwatchRenderer:
    """Draws a palette swatch: the base layer below, the icing dome on top."""

    def __init__(self):
        self.cache = {}

    @staticmethod
    def part_color(parts, name):
        for part in parts:
            if part.name == name and part.color is not None:
                return part.color
        return MISSING_COLOR

    def render(self, parts, size, background, used=False):
        key = (tuple(parts), size, background, used)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        img = Image.new("RGB", (size, size), background)
        draw = ImageDraw.Draw(img)
        pad = max(2, size // 8)
        base_top = int(size * 0.55)
        draw.rectangle((pad, base_top, size - pad, size - pad), fill=self.part_color(parts, "Base"), outline="#5b4636")
        draw.ellipse((pad, pad + size // 8, size - pad, base_top + size // 8), fill=self.part_color(parts, "icing"))
        if used:
            img = img.convert("L").convert("RGB")
        self.cache[key] = img
        return img
