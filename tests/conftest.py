"""Shared fixtures: a stand-in for a Selenium WebDriver."""

from __future__ import annotations

import pytest
from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.common.by import By


class FakeElement:
    def __init__(self, element_id: str):
        self.id = element_id
        self.text_content = ""


class FakeDriver:
    """Knows a fixed set of element ids and applies textContent scripts."""

    def __init__(self, *element_ids: str):
        self.elements = {eid: FakeElement(eid) for eid in element_ids}
        self.scripts: list[tuple] = []
        self.visited: list[str] = []
        self.quit_called = False

    def find_element(self, by, value):
        assert by == By.ID
        if value not in self.elements:
            raise NoSuchElementException(f"no element #{value}")
        return self.elements[value]

    def execute_script(self, script, element, text):
        self.scripts.append((script, element, text))
        element.text_content = text

    def get(self, url):
        self.visited.append(url)

    def quit(self):
        self.quit_called = True


@pytest.fixture()
def driver():
    return FakeDriver("baum")
