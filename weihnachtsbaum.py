#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
weihnachtsbaum.py
Erzeugt einen ASCII-Weihnachtsbaum als reinen Text.

- render_lines(hoehe): Liste der Zeilen (Krone + zwei Stammzeilen)
- render(hoehe): alle Zeilen mit "\\n" verbunden, ohne abschliessenden Umbruch

Keine Ausgabe, kein Zustand: das Anzeigen übernimmt anzeige.py.
"""

from typing import List

STERN = "*"
STAMM = "|"
STANDARD_HOEHE = 10


class InvalidHeightError(ValueError):
    """Höhe ist keine ganze Zahl >= 0."""


def _check_height(hoehe) -> int:
    # bool ist eine Unterklasse von int, zählt hier aber nicht als Höhe
    if isinstance(hoehe, bool) or not isinstance(hoehe, int):
        raise InvalidHeightError(f"Höhe muss eine ganze Zahl sein, nicht {hoehe!r}")
    if hoehe < 0:
        raise InvalidHeightError(f"Höhe darf nicht negativ sein: {hoehe}")
    return hoehe


def render_lines(hoehe: int) -> List[str]:
    """
    Liefert die Zeilen des Baums: `hoehe` Kronenzeilen, danach zweimal den Stamm.
    Bei hoehe == 0 bleiben nur die zwei Stammzeilen ohne Einrückung.
    """
    hoehe = _check_height(hoehe)
    zeilen = []
    for i in range(hoehe):
        sterne = 2 * i + 1                # Sterne pro Zeile
        leerzeichen = hoehe - i - 1       # Einrückung nach links für Zentrierung
        zeilen.append(" " * leerzeichen + STERN * sterne)

    stamm = " " * max(hoehe - 1, 0) + STAMM
    zeilen.append(stamm)
    zeilen.append(stamm)
    return zeilen


def render(hoehe: int = STANDARD_HOEHE) -> str:
    """Baum als ein Textblock."""
    return "\n".join(render_lines(hoehe))
