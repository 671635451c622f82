"""
italianIDs – MCP Server für italienische Verwaltungskennungen.

Startet einen FastMCP Server (stdio) und registriert alle Skills.

Skills:
  anagrafica   – Nome, cognome, titolo, genere, età
  banking      – IBAN (MOD-97) und SWIFT/BIC
  documents    – Tessera Sanitaria und CIE
  partita_iva  – Partita IVA (Prüfziffer & Formatierung)

Verwendung:
  python server.py                        # startet den MCP Server
  claude mcp add italianIDs -- python /pfad/zu/server.py

Konfiguration:
  Kopiere .env.example zu .env und passe die Werte bei Bedarf an.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

# .env aus dem Projektverzeichnis laden (vor allen Skill-Imports)
load_dotenv(Path(__file__).parent / ".env", override=False)

mcp = FastMCP(
    "italianIDs",
    instructions=(
        "Validierung und Formatierung italienischer Kennungen. "
        "Verfügbare Skills: anagrafica, banking (IBAN/SWIFT), "
        "documents (Tessera Sanitaria, CIE), partita_iva. "
        "Datumsangaben immer als YYYY-MM-DD."
    ),
)

# ── Skills registrieren ────────────────────────────────────────────────
from skills.anagrafica import register_tools as _anagrafica  # noqa: E402
from skills.banking import register_tools as _banking  # noqa: E402
from skills.documents import register_tools as _documents  # noqa: E402
from skills.partita_iva import register_tools as _partita_iva  # noqa: E402

_anagrafica(mcp)
_banking(mcp)
_documents(mcp)
_partita_iva(mcp)


def main() -> None:
    mcp.run()


# ── Einstiegspunkt ─────────────────────────────────────────────────────
if __name__ == "__main__":
    main()
