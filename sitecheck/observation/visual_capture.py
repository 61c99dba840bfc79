from playwright.sync_api import Page
from PIL import Image
import io


class VisualCapture:
    def __init__(self, page: Page):
        self.page = page

    def capture(self, full_page: bool = False) -> Image.Image:
        """Captures a screenshot and returns it as a PIL Image."""
        screenshot_bytes = self.page.screenshot(full_page=full_page)
        return Image.open(io.BytesIO(screenshot_bytes))

    def save(self, path: str, full_page: bool = True) -> str:
        self.capture(full_page=full_page).save(path)
        return path
