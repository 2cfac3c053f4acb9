import pytest

from bddsuites.ui_testing.framework.element_actions import ElementActions, PageActions
from bddsuites.ui_testing.framework.exceptions import (
    ElementStateError,
    InteractionTimeoutError,
    InvalidArgumentError,
)
from bddsuites.ui_testing.framework.locators import by_id, by_name
from bddsuites.ui_testing.tests.fake_browser import PNG_BYTES


@pytest.fixture
def actions(session):
    return ElementActions(session)


@pytest.fixture
def page_actions(session):
    return PageActions(session)


def test_send_keys_is_one_fill(actions, page):
    element = page.add_element("id=email", value="old")
    actions.send_keys(page.locator("id=email"), "user@example.com")

    assert element.actions == [("fill", "user@example.com")]
    assert element.value == "user@example.com"


def test_send_keys_enter(actions, page):
    element = page.add_element("id=pass")
    actions.send_keys_enter(page.locator("id=pass"), "secret")

    assert element.actions == [("press_sequentially", "secret"), ("press", "Enter")]


def test_click_waits_for_clickable_then_clicks_once(actions, page):
    clicked = []
    element = page.add_element("id=login", on_click=lambda p: clicked.append(p))

    actions.click(page.locator("id=login"))

    assert element.actions == [("click", "left")]
    assert clicked == [page]


def test_click_on_disabled_element_fails(actions, page):
    element = page.add_element("id=login", enabled=False)

    with pytest.raises(InteractionTimeoutError, match="click"):
        actions.click(page.locator("id=login"))
    assert element.actions == []


@pytest.mark.parametrize(
    "method, expected",
    [
        ("clear", ("clear", None)),
        ("double_click", ("dblclick", None)),
        ("right_click", ("click", "right")),
        ("move_to_element", ("hover", None)),
        ("scroll_into_view", ("scroll_into_view_if_needed", None)),
        ("click_using_js", ("evaluate", "el => el.click()")),
    ],
)
def test_single_primitive_actions(actions, page, method, expected):
    element = page.add_element("id=target")
    getattr(actions, method)(page.locator("id=target"))
    assert element.actions == [expected]


def test_actions_refuse_disabled_elements(actions, page):
    page.add_element("id=target", enabled=False)

    with pytest.raises(ElementStateError, match="double_click FAILED"):
        actions.double_click(page.locator("id=target"))


def test_actions_refuse_none(actions):
    with pytest.raises(InvalidArgumentError, match="send_keys"):
        actions.send_keys(None, "text")


def test_dropdown_selection(actions, page):
    element = page.add_element("id=room", options=[" Standard ", "Deluxe", "Suite"])
    locator = page.locator("id=room")

    actions.select_by_visible_text(locator, "Deluxe")
    assert element.selected == ("label", "Deluxe")
    actions.select_by_value(locator, "suite")
    assert element.selected == ("value", "suite")
    actions.select_by_index(locator, 0)
    assert element.selected == ("index", 0)

    assert actions.get_all_dropdown_options(locator) == ["Standard", "Deluxe", "Suite"]


def test_drag_and_drop_validates_both_elements(actions, page):
    source = page.add_element("id=source")
    page.add_element("id=target", visible=False)

    with pytest.raises(ElementStateError, match="drag_and_drop FAILED -> element is NOT displayed"):
        actions.drag_and_drop(page.locator("id=source"), page.locator("id=target"))
    assert source.actions == []

    page.elements["id=target"].visible = True
    actions.drag_and_drop(page.locator("id=source"), page.locator("id=target"))
    assert source.actions == [("drag_to", "id=target")]


def test_press_key(actions, page):
    element = page.add_element("id=search")
    actions.press_key(page.locator("id=search"), "Tab")
    assert element.actions == [("press", "Tab")]


def test_queries(actions, page):
    page.add_element(
        "id=greeting",
        text="  Welcome Prakash ",
        checked=True,
        attributes={"data-testid": "username"},
        properties={"tagName": "A"},
    )
    locator = page.locator("id=greeting")

    assert actions.get_element_text(locator) == "Welcome Prakash"
    assert actions.get_attribute(locator, "data-testid") == "username"
    assert actions.get_dom_property(locator, "tagName") == "A"
    assert actions.is_element_selected(locator) is True
    assert actions.is_element_enabled(locator) is True


def test_is_element_enabled_checks_presence_and_visibility(actions, page):
    page.add_element("id=login", enabled=False)
    page.add_element("id=errorMessage", visible=False)

    assert actions.is_element_enabled(page.locator("id=login")) is False
    with pytest.raises(ElementStateError, match="is_element_enabled FAILED -> element is NOT displayed"):
        actions.is_element_enabled(page.locator("id=errorMessage"))
    with pytest.raises(InteractionTimeoutError):
        actions.is_element_enabled(page.locator("id=nowhere"))
    with pytest.raises(InvalidArgumentError, match="is_element_enabled FAILED -> element is None"):
        actions.is_element_enabled(None)


def test_is_element_present(actions, page):
    page.add_element('css=[name="email"]')
    assert actions.is_element_present(by_name("email"))
    assert not actions.is_element_present(by_id("missing"))


def test_accept_alert_returns_message(page_actions, page):
    page.add_element("id=delete", on_click=lambda p: p.raise_dialog("Delete booking?"))
    actions = ElementActions(page_actions.session)

    text = page_actions.accept_alert(lambda: actions.click(page.locator("id=delete")))

    assert text == "Delete booking?"
    assert page.dialogs[-1].accepted is True
    assert page.listeners["dialog"] == []


def test_dismiss_alert(page_actions, page):
    text = page_actions.dismiss_alert(lambda: page.raise_dialog("Leave page?"))

    assert text == "Leave page?"
    assert page.dialogs[-1].accepted is False
    assert page_actions.get_alert_text() == "Leave page?"


def test_prompt_text_is_sent(page_actions, page):
    page_actions.accept_alert(lambda: page.raise_dialog("Name?"), prompt_text="Prakash")
    assert page.dialogs[-1].prompt_text == "Prakash"


def test_missing_alert_times_out(page_actions, page):
    with pytest.raises(InteractionTimeoutError, match="no alert present"):
        page_actions.accept_alert(lambda: None)
    assert page.listeners["dialog"] == []


def test_page_navigation_helpers(page_actions, page):
    page.goto("https://qa.hotel.example/")

    assert page_actions.get_page_title() == "OMR Branch Hotel"
    assert page_actions.get_current_url() == "https://qa.hotel.example/"

    page_actions.navigate_back()
    page_actions.navigate_forward()
    page_actions.refresh_page()
    page_actions.press_enter()
    page_actions.scroll_to_bottom()

    assert page.history[-3:] == ["back", "forward", "reload"]
    assert page.keyboard.pressed == ["Enter"]
    assert "scrollHeight" in page.scripts[-1]


def test_screenshot_bytes(page_actions):
    assert page_actions.get_screenshot_as_bytes() == PNG_BYTES


def test_screenshot_with_timestamp_creates_directory(page_actions, tmp_path):
    path = page_actions.screenshot_with_timestamp("login")

    assert path.parent == tmp_path / "screenshots"
    assert path.name.startswith("login_") and path.suffix == ".png"
    assert path.read_bytes() == PNG_BYTES


@pytest.mark.parametrize("method", ["click", "click_using_js", "send_keys", "get_element_text"])
def test_hidden_element_fails_with_state_error(actions, page, method):
    element = page.add_element("id=hidden", visible=False)
    args = ("text",) if method == "send_keys" else ()

    with pytest.raises(ElementStateError, match=f"{method} FAILED -> element is NOT displayed"):
        getattr(actions, method)(page.locator("id=hidden"), *args)
    assert element.actions == []
