"""Anagrafica skill – registra i tool per nomi, titoli, genere ed età."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP


def register_tools(mcp: "FastMCP") -> None:
    """Register all anagrafica tools with the given FastMCP instance."""
    from utils.anagrafica import (
        calculate_age,
        format_full_name,
        get_initials,
        is_over_18,
        is_valid_gender,
        is_valid_name,
        is_valid_surname,
        is_valid_title,
        normalize_name,
    )
    from utils.dates import parse_iso_date
    from utils.errors import InvalidArgumentError
    from utils.logger import logger

    def _flag(ok: bool) -> str:
        return "OK" if ok else "NON VALIDO"

    # ------------------------------------------------------------------

    @mcp.tool()
    def anagrafica_check_person(
        name: str,
        surname: str,
        title: Optional[str] = None,
        gender: Optional[str] = None,
    ) -> str:
        """
        Controlla nome, cognome e (facoltativi) titolo e genere di una persona.

        Args:
            name:    Nome, solo lettere e spazi (es. "Anna Maria").
            surname: Cognome, solo lettere (es. "Rossi").
            title:   Titolo: "Sig.", "Sig.ra" oppure "Dott.".
            gender:  "M" oppure "F" (maiuscole o minuscole).
        """
        checks = [("Nome", name, is_valid_name(name)), ("Cognome", surname, is_valid_surname(surname))]
        if title is not None:
            checks.append(("Titolo", title, is_valid_title(title)))
        if gender is not None:
            checks.append(("Genere", gender, is_valid_gender(gender)))

        lines = [f"{label:<8} {value!r:<25} {_flag(ok)}" for label, value, ok in checks]
        failed = [label for label, _, ok in checks if not ok]
        if failed:
            logger.info("Anagrafica non valida: %s", ", ".join(failed))
            lines.append(f"\nCampi non validi: {', '.join(failed)}")
        else:
            lines.append("\nTutti i campi sono validi.")
        return "\n".join(lines)

    # ------------------------------------------------------------------

    @mcp.tool()
    def anagrafica_age(birthdate: str) -> str:
        """
        Calcola l'età in anni compiuti e indica se la persona è maggiorenne.

        Args:
            birthdate: Data di nascita YYYY-MM-DD (es. "1990-01-01").
        """
        try:
            born = parse_iso_date(birthdate)
        except InvalidArgumentError as exc:
            return f"Errore: {exc}"
        if born is None:
            return "Errore: data di nascita mancante."
        age = calculate_age(born)
        status = "maggiorenne" if is_over_18(born) else "minorenne"
        return f"Età: {age} anni ({status})."

    # ------------------------------------------------------------------

    @mcp.tool()
    def anagrafica_format_name(name: str, surname: str, title: Optional[str] = None) -> str:
        """
        Normalizza nome e cognome e restituisce nome completo e iniziali.

        Args:
            name:    Nome (es. "mario").
            surname: Cognome (es. "ROSSI").
            title:   Titolo facoltativo (es. "Dott.").
        """
        name_n = normalize_name(name.strip())
        surname_n = normalize_name(surname.strip())
        full = format_full_name(title, name_n, surname_n)
        return f"Nome completo: {full}\nIniziali: {get_initials(name_n, surname_n)}"
