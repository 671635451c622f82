"""Partita IVA skill – controllo della cifra di controllo e formattazione."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP


def register_tools(mcp: "FastMCP") -> None:
    """Register all Partita IVA tools with the given FastMCP instance."""
    from utils.errors import InvalidArgumentError
    from utils.logger import logger
    from utils.partita_iva import format_partita_iva, is_valid_partita_iva

    # ------------------------------------------------------------------

    @mcp.tool()
    def partita_iva_check(value: str) -> str:
        """
        Verifica una Partita IVA (11 cifre, prefisso "IT" facoltativo) con cifra di controllo.

        Args:
            value: Partita IVA (es. "12345678903" oppure "IT12345678903").
        """
        code = value.strip()
        if is_valid_partita_iva(code):
            return f"Partita IVA {code}: valida."
        logger.info("Partita IVA rifiutata: %s", code)
        return f"Partita IVA {code or '-'}: NON VALIDA."

    # ------------------------------------------------------------------

    @mcp.tool()
    def partita_iva_format(value: str) -> str:
        """
        Restituisce la Partita IVA nella forma "IT" + 11 cifre.

        Controlla solo il formato (11 cifre), non la cifra di controllo:
        usare partita_iva_check per la verifica completa.

        Args:
            value: Partita IVA con o senza prefisso "IT".
        """
        try:
            return format_partita_iva(value.strip())
        except InvalidArgumentError as exc:
            return f"Errore: {exc}"
