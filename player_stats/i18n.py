from __future__ import annotations

LANGUAGES = ("CAT", "ENG", "ESP")
DEFAULT_LANGUAGE = "ESP"

MENU_SECTIONS = ("home", "stats", "teams", "team_photo", "career", "player_data", "contact")

TRANSLATIONS: dict[str, dict[str, dict[str, str]]] = {
    "ESP": {
        "header": {"menu": "Menú", "title": "{name} STATS"},
        "menu": {
            "home": "Inicio",
            "stats": "Estadísticas",
            "teams": "Equipos",
            "team_photo": "Foto de equipo",
            "career": "Trayectoria",
            "player_data": "Datos del jugador",
            "contact": "Contacto",
        },
        "sidebar": {"total": "Total", "season": "Temporada", "all": "Todas", "team": "Equipo", "language": "Idioma"},
        "stats": {
            "goals": "Goles",
            "average": "Promedio",
            "hat_trick": "Hat-tricks",
            "braces": "Dobletes",
            "assists": "Asistencias",
            "matches": "Partidos",
            "titles": "Títulos",
            "by_season": "Goles por temporada",
            "no_data": "No hay datos para este filtro.",
        },
        "sections": {
            "teams": "Equipos",
            "team_photo": "Foto de equipo",
            "career": "Trayectoria",
            "player_data": "Datos del jugador",
            "contact": "Contacto",
        },
        "table": {
            "season": "Temporada",
            "team": "Equipo",
            "competition": "Competición",
            "played": "PJ",
            "goals": "Goles",
            "assists": "Asist.",
            "titles": "Títulos",
        },
        "player_data": {
            "position": "Posición",
            "jersey_number": "Dorsal",
            "birth_date": "Fecha de nacimiento",
            "birth_place": "Lugar de nacimiento",
            "height": "Altura",
            "nationality": "Nacionalidad",
            "current_club": "Club actual",
            "contract_until": "Contrato hasta",
        },
        "teams_card": {"matches": "PJ", "goals": "goles", "assists": "asist."},
        "alt": {"team_photo": "Foto del equipo", "photo_missing": "Foto no disponible"},
        "footer": {"jersey": "Dorsal"},
    },
    "ENG": {
        "header": {"menu": "Menu", "title": "{name} STATS"},
        "menu": {
            "home": "Home",
            "stats": "Statistics",
            "teams": "Teams",
            "team_photo": "Team photo",
            "career": "Career",
            "player_data": "Player data",
            "contact": "Contact",
        },
        "sidebar": {"total": "Total", "season": "Season", "all": "All", "team": "Team", "language": "Language"},
        "stats": {
            "goals": "Goals",
            "average": "Average",
            "hat_trick": "Hat-tricks",
            "braces": "Braces",
            "assists": "Assists",
            "matches": "Matches",
            "titles": "Titles",
            "by_season": "Goals by season",
            "no_data": "No data for this filter.",
        },
        "sections": {
            "teams": "Teams",
            "team_photo": "Team photo",
            "career": "Career",
            "player_data": "Player data",
            "contact": "Contact",
        },
        "table": {
            "season": "Season",
            "team": "Team",
            "competition": "Competition",
            "played": "MP",
            "goals": "Goals",
            "assists": "Assists",
            "titles": "Titles",
        },
        "player_data": {
            "position": "Position",
            "jersey_number": "Jersey number",
            "birth_date": "Date of birth",
            "birth_place": "Place of birth",
            "height": "Height",
            "nationality": "Nationality",
            "current_club": "Current club",
            "contract_until": "Contract until",
        },
        "teams_card": {"matches": "MP", "goals": "goals", "assists": "assists"},
        "alt": {"team_photo": "Team photo", "photo_missing": "Photo not available"},
        "footer": {"jersey": "Jersey"},
    },
    "CAT": {
        "header": {"menu": "Menú", "title": "{name} STATS"},
        "menu": {
            "home": "Inici",
            "stats": "Estadístiques",
            "teams": "Equips",
            "team_photo": "Foto d'equip",
            "career": "Trajectòria",
            "player_data": "Dades del jugador",
            "contact": "Contacte",
        },
        "sidebar": {"total": "Total", "season": "Temporada", "all": "Totes", "team": "Equip", "language": "Idioma"},
        "stats": {
            "goals": "Gols",
            "average": "Mitjana",
            "hat_trick": "Hat-tricks",
            "braces": "Doblets",
            "assists": "Assistències",
            "matches": "Partits",
            "titles": "Títols",
            "by_season": "Gols per temporada",
            "no_data": "No hi ha dades per a aquest filtre.",
        },
        "sections": {
            "teams": "Equips",
            "team_photo": "Foto d'equip",
            "career": "Trajectòria",
            "player_data": "Dades del jugador",
            "contact": "Contacte",
        },
        "table": {
            "season": "Temporada",
            "team": "Equip",
            "competition": "Competició",
            "played": "PJ",
            "goals": "Gols",
            "assists": "Assist.",
            "titles": "Títols",
        },
        "player_data": {
            "position": "Posició",
            "jersey_number": "Dorsal",
            "birth_date": "Data de naixement",
            "birth_place": "Lloc de naixement",
            "height": "Alçada",
            "nationality": "Nacionalitat",
            "current_club": "Club actual",
            "contract_until": "Contracte fins",
        },
        "teams_card": {"matches": "PJ", "goals": "gols", "assists": "assist."},
        "alt": {"team_photo": "Foto de l'equip", "photo_missing": "Foto no disponible"},
        "footer": {"jersey": "Dorsal"},
    },
}


def translate(lang: str) -> dict[str, dict[str, str]]:
    try:
        return TRANSLATIONS[lang]
    except KeyError:
        raise KeyError(f"Unsupported language {lang!r}; expected one of {', '.join(LANGUAGES)}") from None


def decimal_separator(lang: str) -> str:
    return "." if lang == "ENG" else ","


def format_average(value: float, lang: str) -> str:
    """Two-decimal average using the language's decimal separator."""
    return f"{value:.2f}".replace(".", decimal_separator(lang))
