# ================================================================================
# Element Actions Module
# ================================================================================
#
# Typed UI interactions funnelled through the InteractionGuard.
#
# Key Features:
#   - Every element action validates visibility/displayed/enabled first
#   - Click waits for clickability before validation
#   - Exactly one Playwright call per action
#   - Dropdown, drag and drop, hover, keyboard and JavaScript actions
#   - Alert, frame and window handling
#   - Screenshot capture with Allure attachment
#
# ================================================================================

from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Iterator, List, Optional

import allure
from loguru import logger
from playwright.sync_api import Frame, Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from .browser_manager import DriverSession
from .exceptions import InteractionTimeoutError
from .interaction_guard import InteractionGuard
from .locators import ElementLocator


class ElementActions:
    """
    Guarded element interactions.

    Side effects are confined to the document in the browser; nothing here
    touches configuration or cached page objects.

    Example:
        actions = ElementActions(session)
        actions.send_keys(page.locator("#email"), "user@example.com")
        actions.click(page.locator("//button[@value='login']"))
    """

    def __init__(self, session: DriverSession, guard: Optional[InteractionGuard] = None):
        """
        Args:
            session: Live browser session
            guard: Pre-action validator. Built from the configured timeout if omitted.
        """
        self.session = session
        self.guard = guard or InteractionGuard(session.timeout)

    # =========================================================================
    # Text entry
    # =========================================================================

    @allure.step("Type text into element")
    def send_keys(self, element: Locator, text: str) -> None:
        """Replace the element's content with text."""
        self.guard.validate(element, "send_keys")
        element.fill(text)
        logger.debug(f"Typed {len(text)} characters into {element}")

    @allure.step("Type text into element and press Enter")
    def send_keys_enter(self, element: Locator, text: str) -> None:
        self.guard.validate(element, "send_keys_enter")
        element.press_sequentially(text)
        element.press("Enter")

    @allure.step("Clear element")
    def clear(self, element: Locator) -> None:
        self.guard.validate(element, "clear")
        element.clear()

    # =========================================================================
    # Clicks
    # =========================================================================

    @allure.step("Click element")
    def click(self, element: Locator) -> None:
        """Wait for clickability, validate, then click."""
        self.guard.wait_for_clickable(element, "click")
        self.guard.validate(element, "click")
        element.click()
        logger.debug(f"Clicked: {element}")

    @allure.step("Double click element")
    def double_click(self, element: Locator) -> None:
        self.guard.validate(element, "double_click")
        element.dblclick()

    @allure.step("Right click element")
    def right_click(self, element: Locator) -> None:
        self.guard.validate(element, "right_click")
        element.click(button="right")

    @allure.step("Click element using JavaScript")
    def click_using_js(self, element: Locator) -> None:
        self.guard.validate(element, "click_using_js")
        element.evaluate("el => el.click()")

    # =========================================================================
    # Dropdowns
    # =========================================================================

    @allure.step("Select option by visible text: {text}")
    def select_by_visible_text(self, element: Locator, text: str) -> None:
        self.guard.validate(element, "select_by_visible_text")
        element.select_option(label=text)

    @allure.step("Select option by value: {value}")
    def select_by_value(self, element: Locator, value: str) -> None:
        self.guard.validate(element, "select_by_value")
        element.select_option(value=value)

    @allure.step("Select option by index: {index}")
    def select_by_index(self, element: Locator, index: int) -> None:
        self.guard.validate(element, "select_by_index")
        element.select_option(index=index)

    def get_all_dropdown_options(self, element: Locator) -> List[str]:
        """Return the visible text of every option in a <select>."""
        self.guard.validate(element, "get_all_dropdown_options")
        options = [text.strip() for text in element.locator("option").all_inner_texts()]
        logger.debug(f"Dropdown options: {options}")
        return options

    # =========================================================================
    # Mouse and keyboard
    # =========================================================================

    @allure.step("Drag and drop")
    def drag_and_drop(self, source: Locator, target: Locator) -> None:
        self.guard.validate(source, "drag_and_drop")
        self.guard.validate(target, "drag_and_drop")
        source.drag_to(target)

    @allure.step("Hover over element")
    def move_to_element(self, element: Locator) -> None:
        self.guard.validate(element, "move_to_element")
        element.hover()

    @allure.step("Press key: {key}")
    def press_key(self, element: Locator, key: str) -> None:
        self.guard.validate(element, "press_key")
        element.press(key)

    @allure.step("Scroll element into view")
    def scroll_into_view(self, element: Locator) -> None:
        self.guard.validate(element, "scroll_into_view")
        element.scroll_into_view_if_needed()

    # =========================================================================
    # Queries
    # =========================================================================

    def get_element_text(self, element: Locator) -> str:
        self.guard.validate(element, "get_element_text")
        text = element.inner_text().strip()
        logger.debug(f"Got text from {element}: '{text}'")
        return text

    def get_attribute(self, element: Locator, attribute: str) -> Optional[str]:
        self.guard.validate(element, "get_attribute")
        return element.get_attribute(attribute)

    def get_dom_property(self, element: Locator, property_name: str) -> Any:
        self.guard.validate(element, "get_dom_property")
        return element.evaluate("(el, name) => el[name]", property_name)

    def is_element_selected(self, element: Locator) -> bool:
        self.guard.validate(element, "is_element_selected")
        return element.is_checked()

    def is_element_enabled(self, element: Locator) -> bool:
        """Enabled state of a displayed element; a disabled one returns False."""
        self.guard.validate(element, "is_element_enabled", require_enabled=False)
        return element.is_enabled()

    def is_element_present(self, locator: ElementLocator) -> bool:
        """True if at least one element matches, without waiting."""
        return locator.resolve(self.session.scope).count() > 0


class PageActions:
    """
    Page-level operations: alerts, frames, windows, navigation, screenshots.

    Example:
        page_actions = PageActions(session)
        text = page_actions.accept_alert(lambda: actions.click(delete_button))
        page_actions.screenshot_with_timestamp("after_delete")
    """

    def __init__(self, session: DriverSession):
        self.session = session
        self.last_alert_text: Optional[str] = None

    @property
    def page(self) -> Page:
        return self.session.page

    # =========================================================================
    # Alerts
    # =========================================================================

    @contextmanager
    def handle_alert(
        self,
        accept: bool = True,
        prompt_text: Optional[str] = None,
    ) -> Iterator["PageActions"]:
        """
        Answer the dialog raised by the code inside the block.

        Raises:
            InteractionTimeoutError: no dialog appeared within the timeout.
        """
        page = self.page

        def respond(dialog: Any) -> None:
            self.last_alert_text = dialog.message
            logger.info(f"{'Accepting' if accept else 'Dismissing'} alert: {dialog.message}")
            if accept:
                dialog.accept(prompt_text)
            else:
                dialog.dismiss()

        page.on("dialog", respond)
        try:
            with page.expect_event("dialog", timeout=self.session.timeout_ms):
                yield self
        except PlaywrightTimeoutError as e:
            action = "accept_alert" if accept else "dismiss_alert"
            raise InteractionTimeoutError(
                f"{action} FAILED -> no alert present within {self.session.timeout}s",
                action=action,
            ) from e
        finally:
            page.remove_listener("dialog", respond)

    @allure.step("Accept alert")
    def accept_alert(self, trigger: Callable[[], Any], prompt_text: Optional[str] = None) -> str:
        """Run trigger, accept the dialog it raises and return its message."""
        with self.handle_alert(accept=True, prompt_text=prompt_text):
            trigger()
        return self.last_alert_text

    @allure.step("Dismiss alert")
    def dismiss_alert(self, trigger: Callable[[], Any]) -> str:
        with self.handle_alert(accept=False):
            trigger()
        return self.last_alert_text

    def get_alert_text(self) -> Optional[str]:
        """Message of the last dialog handled."""
        return self.last_alert_text

    # =========================================================================
    # Frames and windows
    # =========================================================================

    def switch_to_frame_by_index(self, index: int) -> Frame:
        return self.session.switch_to_frame(index=index)

    def switch_to_frame_by_name_or_id(self, name_or_id: str) -> Frame:
        return self.session.switch_to_frame(name_or_id=name_or_id)

    def switch_to_frame_by_element(self, frame_element: Locator) -> Frame:
        return self.session.switch_to_frame(element=frame_element)

    def switch_to_default_content(self) -> None:
        self.session.switch_to_default_content()

    def switch_to_child_window(self) -> Page:
        return self.session.switch_to_child_window()

    def close_all_child_windows(self) -> None:
        self.session.close_child_windows()

    # =========================================================================
    # Navigation
    # =========================================================================

    def get_page_title(self) -> str:
        return self.page.title()

    def get_current_url(self) -> str:
        return self.page.url

    def navigate_back(self) -> None:
        self.page.go_back()

    def navigate_forward(self) -> None:
        self.page.go_forward()

    def refresh_page(self) -> None:
        self.page.reload()

    @allure.step("Press Enter")
    def press_enter(self) -> None:
        self.page.keyboard.press("Enter")

    @allure.step("Scroll to top")
    def scroll_to_top(self) -> None:
        self.page.evaluate("window.scrollTo(0, 0)")

    @allure.step("Scroll to bottom")
    def scroll_to_bottom(self) -> None:
        self.page.evaluate("window.scrollTo(0, document.body.scrollHeight)")

    # =========================================================================
    # Screenshots
    # =========================================================================

    def get_screenshot_as_bytes(self, full_page: bool = False) -> bytes:
        return self.page.screenshot(full_page=full_page)

    @allure.step("Take screenshot: {name}")
    def screenshot_with_timestamp(self, name: str, full_page: bool = False) -> Path:
        """
        Save a PNG under the configured screenshot directory.

        Args:
            name: File name prefix
            full_page: Capture the full scrollable page

        Returns:
            Path to the saved screenshot
        """
        screenshot_dir = self.session.config.get_path("screenshotPath")
        screenshot_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = screenshot_dir / f"{name}_{timestamp}.png"

        screenshot = self.page.screenshot(path=str(filepath), full_page=full_page)
        allure.attach(
            screenshot,
            name=name,
            attachment_type=allure.attachment_type.PNG,
        )

        logger.info(f"Screenshot saved: {filepath}")
        return filepath


__all__ = [
    "ElementActions",
    "PageActions",
]
