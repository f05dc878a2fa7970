#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
anzeige.py
Anzeigeflächen ("Sinks") für den fertigen Baumtext.

Jede Fläche ersetzt bei write() ihren gesamten Inhalt; der zuletzt
geschriebene Text gewinnt. show() rechnet zuerst den ganzen Text aus und
schreibt ihn dann in einem Schritt.
"""

import logging
from typing import Optional, Protocol

from rich.console import Console
from rich.markup import escape
from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.common.by import By

from weihnachtsbaum import STAMM, STERN, render

logger = logging.getLogger("weihnachtsbaum.anzeige")

# Setzt den Textinhalt eines Elements, wie textContent im Browser
TEXT_CONTENT_SCRIPT = "arguments[0].textContent = arguments[1];"


class TextSink(Protocol):
    def write(self, text: str) -> Optional[bool]:
        ...


class MemorySink:
    """Hält nur den zuletzt geschriebenen Text."""

    def __init__(self):
        self.text: Optional[str] = None
        self.writes = 0

    def write(self, text: str) -> None:
        self.text = text
        self.writes += 1


class ConsoleSink:
    """
    Gibt den Baum über rich aus. Krone grün, Stamm rot; mit farbig=False
    wird der Text ohne Markup gedruckt.
    """

    def __init__(self, console: Optional[Console] = None, farbig: bool = True):
        self.console = console or Console(force_terminal=farbig)
        self.farbig = farbig

    def markup(self, text: str) -> str:
        if not self.farbig:
            return text
        # eckige Klammern im Text sind kein Markup
        return (
            escape(text)
            .replace(STERN, f"[green]{STERN}[/green]")
            .replace(STAMM, f"[red]{STAMM}[/red]")
        )

    def write(self, text: str) -> None:
        # soft_wrap: breite Bäume nicht umbrechen, Zeilen bleiben wie gerendert
        self.console.print(self.markup(text), markup=self.farbig, highlight=False, soft_wrap=True)


class BrowserSink:
    """
    Schreibt in ein Element einer Seite, die in einem Selenium-WebDriver
    geladen ist (textContent wird komplett ersetzt).
    """

    def __init__(self, driver, element_id: str = "baum"):
        self.driver = driver
        self.element_id = element_id

    def write(self, text: str) -> bool:
        try:
            el = self.driver.find_element(By.ID, self.element_id)
        except NoSuchElementException:
            logger.warning("Element #%s nicht gefunden, nichts geschrieben.", self.element_id)
            return False
        self.driver.execute_script(TEXT_CONTENT_SCRIPT, el, text)
        logger.info("Baum in #%s geschrieben (%d Zeichen).", self.element_id, len(text))
        return True


def show(hoehe: int, sink: Optional[TextSink] = None) -> str:
    """
    Rendert den Baum und schreibt ihn in `sink`.
    Ohne sink wird nur gerendert; der Text wird immer zurückgegeben.
    """
    text = render(hoehe)
    if sink is None:
        logger.info("Keine Anzeigefläche angegeben, Ausgabe übersprungen.")
        return text
    sink.write(text)
    return text
