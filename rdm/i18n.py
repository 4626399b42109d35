"""UI strings and date-label formats for the dashboard.

Languages:
  id: Indonesian (default, labels like "5 Feb", "17 Agu")
  en: English (labels like "Feb 5", "Aug 17")

Usage::

    tr = Translator("en")
    tr("main_chart_title")
    tr("slider_caption", v=50)
"""
from __future__ import annotations

import datetime as _dt
import logging

__all__ = [
    "DEFAULT_LANG",
    "LANG_CODES",
    "TRANSLATIONS",
    "MONTH_ABBR",
    "Translator",
    "format_day_label",
]

logger = logging.getLogger(__name__)

DEFAULT_LANG = "id"
LANG_CODES = ["id", "en"]

MONTH_ABBR = {
    "id": ["Jan", "Feb", "Mar", "Apr", "Mei", "Jun", "Jul", "Agu", "Sep", "Okt", "Nov", "Des"],
    "en": ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"],
}

_LABEL_FORMATS = {
    "id": "{day} {mon}",
    "en": "{mon} {day}",
}

TRANSLATIONS: dict[str, dict[str, str]] = {
    "id": {
        "lang_id": "Bahasa Indonesia",
        "lang_en": "English",
        "language_label": "Bahasa",
        "app_title": "Dasbor Prediksi Curah Hujan",
        "tagline": "Data sintetis: regresi linear, random forest dan ensemble",
        "generating_data": "Membuat data sintetis...",
        "controls": "Pengaturan",
        "period_label": "Periode",
        "period_initial": "100 hari pertama",
        "period_wet": "Musim hujan",
        "period_dry": "Musim kemarau",
        "period_all": "Setahun penuh",
        "seed_label": "Seed (kosong = acak)",
        "seed_invalid": "Seed harus bilangan bulat: {raw}",
        "regenerate": "Buat ulang data",
        "main_chart_title": "Curah hujan harian: aktual vs model",
        "actual_name": "Aktual",
        "ensemble_name": "Ensemble",
        "rf_name": "Random Forest",
        "lr_name": "Regresi Linear",
        "persistence_name": "Persistence",
        "rain_axis": "Curah Hujan (mm)",
        "date_axis": "Tanggal",
        "error_chart_title": "Perbandingan galat model (RMSE)",
        "error_axis": "RMSE (mm)",
        "error_table_caption": "Galat dihitung dari data sintetis",
        "scatter_title": "Aktual vs Ensemble",
        "scatter_x": "Aktual (mm)",
        "scatter_y": "Ensemble (mm)",
        "ews_header": "Simulasi Peringatan Dini",
        "slider_label": "Curah hujan input (mm)",
        "slider_caption": "Input: {v} mm",
        "no_data": "Tidak ada data untuk ditampilkan.",
        "download_csv": "Unduh CSV",
        "summary_days": "Jumlah hari",
        "summary_nonzero_days": "Hari hujan > 0 mm",
        "summary_max": "Maksimum (mm)",
        "footer_caption": "Data sintetis untuk demonstrasi, bukan prakiraan nyata.",
    },
    "en": {
        "lang_id": "Bahasa Indonesia",
        "lang_en": "English",
        "language_label": "Language",
        "app_title": "Rainfall Prediction Dashboard",
        "tagline": "Synthetic data: linear regression, random forest and ensemble",
        "generating_data": "Generating synthetic data...",
        "controls": "Controls",
        "period_label": "Period",
        "period_initial": "First 100 days",
        "period_wet": "Wet season",
        "period_dry": "Dry season",
        "period_all": "Full year",
        "seed_label": "Seed (empty = random)",
        "seed_invalid": "Seed must be an integer: {raw}",
        "regenerate": "Regenerate data",
        "main_chart_title": "Daily rainfall: actual vs models",
        "actual_name": "Actual",
        "ensemble_name": "Ensemble",
        "rf_name": "Random Forest",
        "lr_name": "Linear Reg",
        "persistence_name": "Persistence",
        "rain_axis": "Rainfall (mm)",
        "date_axis": "Date",
        "error_chart_title": "Model error comparison (RMSE)",
        "error_axis": "RMSE (mm)",
        "error_table_caption": "Errors computed from the synthetic series",
        "scatter_title": "Actual vs Ensemble",
        "scatter_x": "Actual (mm)",
        "scatter_y": "Ensemble (mm)",
        "ews_header": "Early Warning Simulation",
        "slider_label": "Input rainfall (mm)",
        "slider_caption": "Input: {v} mm",
        "no_data": "No data to display.",
        "download_csv": "Download CSV",
        "summary_days": "Days",
        "summary_nonzero_days": "Days with rain > 0 mm",
        "summary_max": "Maximum (mm)",
        "footer_caption": "Synthetic demo data, not a real forecast.",
    },
}


class Translator:
    """Callable key -> localized string lookup with English then key fallback."""

    def __init__(self, lang: str = DEFAULT_LANG):
        if lang not in TRANSLATIONS:
            logger.debug("Unknown language %r, using %s", lang, DEFAULT_LANG)
            lang = DEFAULT_LANG
        self.lang = lang

    def __call__(self, key: str, **fmt) -> str:
        text = TRANSLATIONS[self.lang].get(key)
        if text is None:
            text = TRANSLATIONS["en"].get(key, key)
        return text.format(**fmt) if fmt else text


def format_day_label(date: _dt.date, lang: str = DEFAULT_LANG) -> str:
    """Short day/month label, e.g. ``17 Agu`` (id) or ``Aug 17`` (en)."""
    if lang not in MONTH_ABBR:
        lang = DEFAULT_LANG
    mon = MONTH_ABBR[lang][date.month - 1]
    return _LABEL_FORMATS[lang].format(day=date.day, mon=mon)
