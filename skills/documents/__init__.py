"""
Documents skill – Tessera Sanitaria e Carta d'Identità Elettronica (CIE).

Le date vanno passate nel formato YYYY-MM-DD.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP


def register_tools(mcp: "FastMCP") -> None:
    """Register health-card and CIE tools with the given FastMCP instance."""
    from utils.dates import parse_iso_date
    from utils.errors import InvalidArgumentError
    from utils.health_card import is_card_currently_valid, is_valid_hic_serial
    from utils.identity_card import is_valid_cie, is_valid_cie_serial

    # ------------------------------------------------------------------

    @mcp.tool()
    def documents_check_health_card(serial: str, expiration_date: Optional[str] = None) -> str:
        """
        Verifica una Tessera Sanitaria: numero di serie (20 cifre) e scadenza.

        Args:
            serial:          Numero di identificazione della tessera (20 cifre).
            expiration_date: Data di scadenza YYYY-MM-DD.
        """
        try:
            expires = parse_iso_date(expiration_date)
        except InvalidArgumentError as exc:
            return f"Errore: {exc}"

        problems = []
        if not is_valid_hic_serial(serial):
            problems.append("numero di serie non valido (attese 20 cifre)")
        if expires is None:
            problems.append("data di scadenza mancante")
        elif not is_card_currently_valid(expires):
            problems.append(f"tessera scaduta il {expires.isoformat()}")

        if problems:
            return "Tessera Sanitaria NON VALIDA: " + "; ".join(problems) + "."
        return f"Tessera Sanitaria valida fino al {expires.isoformat()}."

    # ------------------------------------------------------------------

    @mcp.tool()
    def documents_check_cie(
        serial: str,
        issue_date: Optional[str] = None,
        expiration_date: Optional[str] = None,
    ) -> str:
        """
        Verifica una CIE: numero di serie (2 lettere, 5 cifre, 2 lettere) e date.

        Args:
            serial:          Numero della carta (es. "CA12345AB").
            issue_date:      Data di rilascio YYYY-MM-DD.
            expiration_date: Data di scadenza YYYY-MM-DD, successiva al rilascio.
        """
        try:
            issued = parse_iso_date(issue_date)
            expires = parse_iso_date(expiration_date)
        except InvalidArgumentError as exc:
            return f"Errore: {exc}"

        if is_valid_cie(serial, issued, expires):
            return f"CIE {serial.upper()}: valida."

        problems = []
        if not is_valid_cie_serial(serial):
            problems.append("numero di serie non valido")
        if issued is None or expires is None:
            problems.append("date di rilascio e scadenza obbligatorie")
        elif issued >= expires:
            problems.append("la data di rilascio deve precedere la scadenza")
        return "CIE NON VALIDA: " + "; ".join(problems) + "."
