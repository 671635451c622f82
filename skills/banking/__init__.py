"""Banking skill – controllo e formattazione di IBAN e codici SWIFT/BIC."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP


def register_tools(mcp: "FastMCP") -> None:
    """Register all banking tools with the given FastMCP instance."""
    from utils.errors import InvalidArgumentError
    from utils.iban_validator import format_iban, is_valid_swift, validate_iban
    from utils.logger import logger

    # ------------------------------------------------------------------

    @mcp.tool()
    def banking_check_iban(iban: str) -> str:
        """
        Verifica un IBAN (formato e checksum MOD-97).

        Spazi e minuscole vengono normalizzati prima del controllo.

        Args:
            iban: IBAN da verificare (es. "IT60 X054 2811 1010 0000 0123 456").
        """
        result = validate_iban(iban)
        if not result.valid:
            logger.info("IBAN rifiutato: %s (%s)", result.masked, result.error)
            return f"IBAN {result.masked or '-'}: NON VALIDO – {result.error}"
        return f"IBAN {result.masked}: valido."

    # ------------------------------------------------------------------

    @mcp.tool()
    def banking_format_iban(iban: str) -> str:
        """
        Restituisce l'IBAN raggruppato a blocchi di 4 caratteri.

        Args:
            iban: IBAN senza spazi, in maiuscolo (es. "IT60X0542811101000000123456").
        """
        try:
            return format_iban(iban)
        except InvalidArgumentError:
            return "Errore: IBAN non valido, impossibile formattarlo."

    # ------------------------------------------------------------------

    @mcp.tool()
    def banking_check_swift(swift: str) -> str:
        """
        Verifica un codice SWIFT/BIC (8 o 11 caratteri).

        Args:
            swift: Codice BIC (es. "BCITITMM" oppure "BCITITMM500").
        """
        code = swift.strip()
        if is_valid_swift(code):
            return f"SWIFT/BIC {code}: valido."
        return f"SWIFT/BIC {code or '-'}: NON VALIDO."
