"""
Configuration : variables d'environnement (lues à l'appel, pas à l'import).

TRIP_TEMPLATE_LOGO_TEXT     texte du logo affiché par le bloc header
TRIP_TEMPLATE_DEFAULT_NAME  nom d'un nouveau template
LOG_LEVEL                   niveau du logging racine (app.py)
"""
import os

TEMPLATE_VERSION  = "1.0.0"
TEMPLATE_TYPE     = "booking_confirmation"
TEMPLATE_LANGUAGE = "en"


def logo_text() -> str:
    return os.getenv("TRIP_TEMPLATE_LOGO_TEXT", "BELLAROME")


def default_template_name() -> str:
    return os.getenv("TRIP_TEMPLATE_DEFAULT_NAME", "Booking Confirmation")


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
