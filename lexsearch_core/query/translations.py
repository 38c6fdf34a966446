"""LexSearch Default Translations - Legal Term Dictionary.

Common Croatian, English and Spanish labour-law terms with their
counterparts in the other two languages, most preferred first.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Dict, Tuple

TranslationEntries = Dict[str, Dict[str, Tuple[str, ...]]]

DEFAULT_TRANSLATIONS: TranslationEntries = {
    # Working time
    "radna vremena": {"en": ("working hours",), "es": ("horas trabajo",)},
    "working hours": {"hr": ("radna vremena",), "es": ("horas trabajo",)},
    "horas trabajo": {"hr": ("radna vremena",), "en": ("working hours",)},
    "radno vrijeme": {"en": ("working time",), "es": ("tiempo trabajo",)},
    "working time": {"hr": ("radno vrijeme",), "es": ("tiempo trabajo",)},
    "tiempo trabajo": {"hr": ("radno vrijeme",), "en": ("working time",)},
    "jornada": {"hr": ("radno vrijeme",), "en": ("working day",)},
    "working day": {"hr": ("radno vrijeme",), "es": ("jornada",)},
    "horario": {"hr": ("raspored",), "en": ("schedule",)},
    "raspored": {"en": ("schedule",), "es": ("horario",)},
    "schedule": {"hr": ("raspored",), "es": ("horario",)},

    # Contracts
    "ugovor": {"en": ("contract",), "es": ("contrato",)},
    "contract": {"hr": ("ugovor",), "es": ("contrato",)},
    "contrato": {"hr": ("ugovor",), "en": ("contract",)},
    "ugovor o radu": {"en": ("employment contract",), "es": ("contrato trabajo",)},
    "employment contract": {"hr": ("ugovor o radu",), "es": ("contrato trabajo",)},
    "contrato trabajo": {"hr": ("ugovor o radu",), "en": ("employment contract",)},

    # Leave
    "odmor": {"en": ("leave",), "es": ("vacaciones",)},
    "leave": {"hr": ("odmor", "dopust"), "es": ("vacaciones",)},
    "vacaciones": {"hr": ("odmor",), "en": ("leave",)},
    "vacation": {"hr": ("odmor", "godišnji odmor", "godišnji"), "es": ("vacaciones",)},
    "holiday": {"hr": ("odmor", "godišnji odmor", "godišnji"), "es": ("vacaciones",)},
    "holidays": {"hr": ("odmor",), "es": ("vacaciones",)},
    "vacation days": {"hr": ("godišnji odmor",), "es": ("días de vacaciones",)},
    "días de vacaciones": {"hr": ("godišnji odmor",), "en": ("vacation days",)},
    "godišnji odmor": {"en": ("annual leave",), "es": ("vacaciones anuales",)},
    "annual leave": {"hr": ("godišnji odmor",), "es": ("vacaciones anuales",)},
    "vacaciones anuales": {"hr": ("godišnji odmor",), "en": ("annual leave",)},
    "godišnji": {"en": ("annual",), "es": ("anual",)},
    "annual": {"hr": ("godišnji",), "es": ("anual",)},
    "anual": {"hr": ("godišnji",), "en": ("annual",)},
    "descanso": {"hr": ("odmor",), "en": ("rest",)},
    "rest": {"hr": ("odmor",), "es": ("descanso",)},
    "licencia": {"hr": ("dopust",), "en": ("license",)},
    "dopust": {"en": ("license",), "es": ("licencia",)},
    "baja": {"hr": ("bolovanje",), "en": ("sick leave",)},
    "bolovanje": {"en": ("sick leave",), "es": ("baja",)},
    "baja por enfermedad": {"hr": ("bolovanje",), "en": ("sick leave",)},
    "sick leave": {"hr": ("bolovanje",), "es": ("baja por enfermedad",)},

    # Maternity
    "rodiljski dopust": {"en": ("maternity leave",), "es": ("licencia maternidad",)},
    "maternity leave": {"hr": ("rodiljski dopust",), "es": ("licencia maternidad",)},
    "licencia maternidad": {"hr": ("rodiljski dopust",), "en": ("maternity leave",)},
    "maternal": {"hr": ("majčinski",), "es": ("maternal",)},
    "majčinski": {"en": ("maternal",), "es": ("maternal",)},
    "materinski": {"en": ("maternity",), "es": ("maternidad",)},
    "maternity": {"hr": ("materinski",), "es": ("maternidad",)},
    "maternidad": {"hr": ("materinski",), "en": ("maternity",)},
    "pregnancy": {"hr": ("trudnoća",), "es": ("embarazo",)},
    "trudnoća": {"en": ("pregnancy",), "es": ("embarazo",)},
    "embarazo": {"hr": ("trudnoća",), "en": ("pregnancy",)},
    "porodiljna": {"en": ("maternity benefit",), "es": ("prestación maternidad",)},
    "maternity benefit": {"hr": ("porodiljna",), "es": ("prestación maternidad",)},
    "prestación maternidad": {"hr": ("porodiljna",), "en": ("maternity benefit",)},

    # Termination
    "otkaz": {"en": ("termination",), "es": ("despido",)},
    "termination": {"hr": ("otkaz",), "es": ("despido",)},
    "despido": {"hr": ("otkaz",), "en": ("termination",)},
    "otkazni rok": {"en": ("notice period",), "es": ("período aviso",)},
    "notice period": {"hr": ("otkazni rok",), "es": ("período aviso",)},
    "período aviso": {"hr": ("otkazni rok",), "en": ("notice period",)},

    # Pay and overtime
    "plaća": {"en": ("salary",), "es": ("salario",)},
    "salary": {"hr": ("plaća",), "es": ("salario",)},
    "salario": {"hr": ("plaća",), "en": ("salary",)},
    "prekovremeni rad": {"en": ("overtime work",), "es": ("trabajo horas extra",)},
    "overtime work": {"hr": ("prekovremeni rad",), "es": ("trabajo horas extra",)},
    "trabajo horas extra": {"hr": ("prekovremeni rad",), "en": ("overtime work",)},
    "prekovremeni": {"en": ("overtime",), "es": ("horas extra",)},
    "overtime": {"hr": ("prekovremeni",), "es": ("horas extra",)},
    "horas extra": {"hr": ("prekovremeni",), "en": ("overtime",)},
    "prestaciones": {"hr": ("beneficije",), "en": ("benefits",)},
    "beneficije": {"en": ("benefits",), "es": ("prestaciones",)},
    "benefits": {"hr": ("beneficije",), "es": ("prestaciones",)},

    # Parties
    "radnik": {"en": ("worker",), "es": ("trabajador",)},
    "worker": {"hr": ("radnik",), "es": ("trabajador",)},
    "trabajador": {"hr": ("radnik",), "en": ("worker",)},
    "radnica": {"en": ("female worker",), "es": ("trabajadora",)},
    "female worker": {"hr": ("radnica",), "es": ("trabajadora",)},
    "trabajadora": {"hr": ("radnica",), "en": ("female worker",)},
    "poslodavac": {"en": ("employer",), "es": ("empleador",)},
    "employer": {"hr": ("poslodavac",), "es": ("empleador",)},
    "empleador": {"hr": ("poslodavac",), "en": ("employer",)},
    "zaposlenik": {"en": ("employee",), "es": ("empleado",)},
    "employee": {"hr": ("zaposlenik",), "es": ("empleado",)},
    "empleado": {"hr": ("zaposlenik",), "en": ("employee",)},
    "zaposlenica": {"en": ("female employee",), "es": ("empleada",)},
    "female employee": {"hr": ("zaposlenica",), "es": ("empleada",)},
    "empleada": {"hr": ("zaposlenica",), "en": ("female employee",)},
    "tvrtka": {"en": ("company",), "es": ("empresa",)},
    "company": {"hr": ("tvrtka",), "es": ("empresa",)},
    "empresa": {"hr": ("tvrtka",), "en": ("company",)},
    "dijete": {"en": ("baby",), "es": ("bebé",)},
    "baby": {"hr": ("dijete",), "es": ("bebé",)},
    "bebé": {"hr": ("dijete",), "en": ("baby",)},

    # Time units
    "sati": {"en": ("hours",), "es": ("horas",)},
    "hours": {"hr": ("sati",), "es": ("horas",)},
    "horas": {"hr": ("sati",), "en": ("hours",)},
    "dana": {"en": ("days",), "es": ("días",)},
    "days": {"hr": ("dana",), "es": ("días",)},
    "días": {"hr": ("dana",), "en": ("days",)},
    "mjeseci": {"en": ("months",), "es": ("meses",)},
    "months": {"hr": ("mjeseci",), "es": ("meses",)},
    "meses": {"hr": ("mjeseci",), "en": ("months",)},
    "godina": {"en": ("years",), "es": ("años",)},
    "years": {"hr": ("godina",), "es": ("años",)},
    "años": {"hr": ("godina",), "en": ("years",)},
}


__all__ = ["DEFAULT_TRANSLATIONS", "TranslationEntries"]
