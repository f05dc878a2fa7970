#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
baum_seite.py
Statische Webseite mit dem ASCII-Weihnachtsbaum.

Ablauf von main():
- Seite (weihnachtsbaum.html) mit dem Baum im Ausgabebereich <pre id="baum"> schreiben
- Seite in Chrome öffnen (Selenium + webdriver-manager; lädt beim ersten
  Start den Chromedriver herunter)
- Baum einmal mit HOEHE rendern und in den Ausgabebereich schreiben
- Baum zusätzlich farbig in der Konsole ausgeben (rich)
"""

import html
import logging
import time
from pathlib import Path

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.chrome.service import Service
from webdriver_manager.chrome import ChromeDriverManager

from anzeige import BrowserSink, ConsoleSink, show
from weihnachtsbaum import STANDARD_HOEHE, render

# -------------------- Konfiguration --------------------
HOEHE = STANDARD_HOEHE
OUTPUT_HTML = "weihnachtsbaum.html"
HEADLESS = False            # Für Entwicklung: False (sichtbar)
THEME = "dunkel"            # "dunkel" oder "hell"
ELEMENT_ID = "baum"
ANZEIGE_DAUER = 5           # Sekunden, die das Browserfenster offen bleibt
# -------------------------------------------------------

logger = logging.getLogger("weihnachtsbaum.seite")

THEMES = {
    "dunkel": {"hintergrund": "#0b1d13", "text": "#e8f5e9", "baum": "#4caf50"},
    "hell": {"hintergrund": "#fdfdf8", "text": "#1b1b1b", "baum": "#1b5e20"},
}

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="de">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <meta name="description" content="ASCII-Weihnachtsbaum">
  <title>{titel}</title>
  <style>
    body {{ background: {hintergrund}; color: {text}; font-family: system-ui, sans-serif; }}
    main {{ display: flex; flex-direction: column; align-items: center; }}
    pre#{element_id} {{ color: {baum}; font-family: monospace; line-height: 1.1; }}
  </style>
</head>
<body>
  <main>
    <h1>{titel}</h1>
    <pre id="{element_id}" role="img" aria-label="{aria_label}">{baum_text}</pre>
  </main>
</body>
</html>
"""


def build_page(text: str = "", titel: str = "Frohe Weihnachten",
               theme: str = THEME, element_id: str = ELEMENT_ID) -> str:
    """
    Baut die HTML-Seite. `text` landet escaped im <pre>-Ausgabebereich;
    das Theme bestimmt nur die Farben.
    """
    if theme not in THEMES:
        raise ValueError(f"Unbekanntes Theme: {theme!r} (erlaubt: {', '.join(THEMES)})")
    return PAGE_TEMPLATE.format(
        titel=html.escape(titel),
        element_id=element_id,
        aria_label="ASCII-Kunst: Weihnachtsbaum aus Sternen mit Stamm",
        baum_text=html.escape(text),
        **THEMES[theme],
    )


def write_page(path, text: str = "", **kwargs) -> Path:
    """Schreibt die Seite als UTF-8 und liefert den Pfad zurück."""
    path = Path(path)
    path.write_text(build_page(text, **kwargs), encoding="utf-8")
    logger.info("Seite geschrieben: %s", path)
    return path


def init_driver(headless: bool = True) -> webdriver.Chrome:
    """Initialisiert Chrome-WebDriver via webdriver-manager."""
    options = Options()
    if headless:
        options.add_argument("--headless=new")
    options.add_argument("--no-sandbox")
    options.add_argument("--disable-dev-shm-usage")
    options.add_argument("--window-size=800,900")
    service = Service(ChromeDriverManager().install())
    try:
        driver = webdriver.Chrome(service=service, options=options)
    except WebDriverException as e:
        logger.error("Fehler beim Starten des WebDrivers: %s", e)
        raise
    return driver


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s: %(message)s")

    # Seite enthält den Baum schon ohne Browser; Selenium ersetzt ihn beim Laden
    seite = write_page(OUTPUT_HTML, render(HOEHE), theme=THEME, element_id=ELEMENT_ID).resolve()
    driver = init_driver(HEADLESS)
    try:
        driver.get(seite.as_uri())
        show(HOEHE, BrowserSink(driver, ELEMENT_ID))
        if not HEADLESS:
            time.sleep(ANZEIGE_DAUER)
    finally:
        driver.quit()

    show(HOEHE, ConsoleSink())


if __name__ == "__main__":
    main()
