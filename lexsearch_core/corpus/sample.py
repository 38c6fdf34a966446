"""LexSearch Sample Corpus - Croatian Labour Act Articles.

Eight articles of the Croatian Labour Act (Zakon o radu) in Croatian,
English and Spanish, in the exported article record shape. Bodies are
abridged to their leading paragraphs.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Any, Dict, List

from lexsearch_core.corpus.document import Document, load_documents

SAMPLE_ARTICLES: List[Dict[str, Any]] = [
    {
        "id": "art_001",
        "number": "Članak 1",
        "officialNumber": "Članak 1 (NN 93/14, 127/17, 98/19, 151/22)",
        "section": "general",
        "articleType": "scope",
        "title": "Predmet uređivanja",
        "croatian": (
            "(1) Ovim se Zakonom uređuju radni odnosi u Republici Hrvatskoj, ako drugim "
            "zakonom ili međunarodnim ugovorom, koji je sklopljen i potvrđen u skladu s "
            "Ustavom Republike Hrvatske, te objavljen, a koji je na snazi, nije drukčije određeno.\n\n"
            "(2) Odredbe ovog Zakona primjenjuju se na sve radnike i poslodavce koji stupaju "
            "u radni odnos na području Republike Hrvatske."
        ),
        "english": (
            "(1) This Act regulates labor relations in the Republic of Croatia, unless otherwise "
            "determined by another law or international agreement that has been concluded and "
            "confirmed in accordance with the Constitution of the Republic of Croatia, published and in force.\n\n"
            "(2) The provisions of this Act apply to all workers and employers who enter into "
            "employment relationships within the territory of the Republic of Croatia."
        ),
        "spanish": (
            "(1) Esta Ley regula las relaciones laborales en la República de Croacia, a menos que "
            "se determine de otra manera por otra ley o acuerdo internacional que haya sido concluido "
            "y confirmado de acuerdo con la Constitución de la República de Croacia, publicado y en vigor.\n\n"
            "(2) Las disposiciones de esta Ley se aplican a todos los trabajadores y empleadores que "
            "establecen relaciones laborales dentro del territorio de la República de Croacia."
        ),
        "keywords": [
            "zakon o radu", "radni odnosi", "Republika Hrvatska", "labor law", "labor relations",
            "Republic Croatia", "ley laboral", "relaciones laborales", "República Croacia",
            "primjena", "application", "aplicación",
        ],
        "tags": ["general", "scope", "jurisdiction", "exceptions"],
        "lastUpdated": "2024-08-20",
    },
    {
        "id": "art_002",
        "number": "Članak 2",
        "officialNumber": "Članak 2 (NN 93/14, 151/22)",
        "section": "general",
        "articleType": "definitions",
        "title": "Definicije",
        "croatian": (
            "(1) Radni odnos je odnos između radnika i poslodavca zasnovan na ugovoru o radu kojim "
            "se radnik obvezuje za naknadu obavljati rad po uputama i pod nadzorom poslodavca.\n\n"
            "(2) Radnik je fizička osoba koja na temelju ugovora o radu obavlja rad za poslodavca."
        ),
        "english": (
            "(1) Employment relationship is a relationship between a worker and an employer based on "
            "an employment contract whereby the worker undertakes to perform work for compensation "
            "according to instructions and under the supervision of the employer.\n\n"
            "(2) A worker is a natural person who performs work for an employer based on an employment contract."
        ),
        "spanish": (
            "(1) La relación laboral es una relación entre un trabajador y un empleador basada en un "
            "contrato de trabajo mediante el cual el trabajador se compromete a realizar trabajo por "
            "compensación según las instrucciones y bajo la supervisión del empleador.\n\n"
            "(2) Un trabajador es una persona física que realiza trabajo para un empleador basándose "
            "en un contrato de trabajo."
        ),
        "keywords": [
            "radni odnos", "radnik", "poslodavac", "ugovor o radu", "employment relationship",
            "worker", "employer", "employment contract", "relación laboral", "trabajador",
            "empleador", "contrato trabajo", "radno mjesto", "job position", "puesto trabajo",
        ],
        "tags": ["definitions", "employment", "contract", "job-position"],
        "lastUpdated": "2024-08-20",
    },
    {
        "id": "art_003",
        "number": "Članak 15",
        "officialNumber": "Članak 15 (NN 93/14, 151/22)",
        "section": "contracts",
        "articleType": "requirements",
        "title": "Sadržaj ugovora o radu",
        "croatian": (
            "(1) Ugovor o radu sklopljen u pisanom obliku, odnosno potvrda o sklopljenom ugovoru o "
            "radu, mora sadržavati podatke o: mjestu rada, opisu posla, datumu početka rada, trajanju "
            "godišnjeg odmora ili načinu utvrđivanja trajanja godišnjeg odmora, duljini otkaznog roka, "
            "osnovnoj plaći i dodacima na plaću, uobičajenom dnevnom i tjednom radnom vremenu."
        ),
        "english": (
            "(1) The employment contract concluded in written form, i.e., the certificate of the "
            "concluded employment contract, must contain information about: the place of work, the job "
            "description, the date of commencement of work, the duration of annual leave or the method "
            "of determining the duration of annual leave, the length of the notice period, basic salary "
            "and salary supplements, usual daily and weekly working hours."
        ),
        "spanish": (
            "(1) El contrato de trabajo celebrado por escrito, es decir, el certificado del contrato de "
            "trabajo celebrado, deberá contener información sobre: el lugar de trabajo, la descripción "
            "del trabajo, la fecha de inicio del trabajo, la duración de las vacaciones anuales o el "
            "método para determinar la duración de las vacaciones anuales, la duración del período de "
            "aviso, el salario básico y los suplementos salariales, las horas de trabajo diarias y "
            "semanales habituales."
        ),
        "keywords": [
            "ugovor o radu", "pisani oblik", "sadržaj ugovora", "mjesto rada", "opis posla", "plaća",
            "employment contract", "written form", "contract content", "workplace", "job description",
            "salary", "contrato trabajo", "forma escrita", "contenido contrato", "lugar trabajo",
            "descripción trabajo", "salario",
        ],
        "tags": ["contracts", "written", "requirements", "content", "obligations"],
        "lastUpdated": "2024-08-20",
    },
    {
        "id": "art_004",
        "number": "Članak 60",
        "officialNumber": "Članak 60 (NN 93/14, 98/19)",
        "section": "working-time",
        "articleType": "hours",
        "title": "Puno radno vrijeme",
        "croatian": (
            "(1) Puno radno vrijeme ne može biti duže od 40 sati tjedno.\n\n"
            "(2) Poslodavac može odrediti kraće puno radno vrijeme od 40 sati tjedno.\n\n"
            "(3) Radni tjedan počinje u ponedjeljak u 00,00 sati, a završava u nedjelju u 24,00 sata."
        ),
        "english": (
            "(1) Full-time working hours may not exceed 40 hours per week.\n\n"
            "(2) The employer may determine shorter full-time working hours than 40 hours per week.\n\n"
            "(3) The working week begins on Monday at 00:00 hours and ends on Sunday at 24:00 hours."
        ),
        "spanish": (
            "(1) Las horas de trabajo a tiempo completo no pueden exceder 40 horas por semana.\n\n"
            "(2) El empleador puede determinar horas de trabajo a tiempo completo más cortas que 40 "
            "horas por semana.\n\n"
            "(3) La semana laboral comienza el lunes a las 00:00 horas y termina el domingo a las 24:00 horas."
        ),
        "keywords": [
            "puno radno vrijeme", "40 sati", "tjedno", "smjene", "radni tjedan", "full-time",
            "40 hours", "weekly", "shifts", "working week", "tiempo completo", "40 horas",
            "semanal", "turnos", "semana laboral",
        ],
        "tags": ["working-time", "hours", "limits", "shifts", "weekly"],
        "lastUpdated": "2024-08-20",
    },
    {
        "id": "art_005",
        "number": "Članak 62",
        "officialNumber": "Članak 62 (NN 93/14, 98/19)",
        "section": "working-time",
        "articleType": "overtime",
        "title": "Prekovremeni rad",
        "croatian": (
            "(1) Prekovremeni rad je rad koji se obavlja preko punog radnog vremena utvrđenog "
            "ugovorom o radu, općim aktom poslodavca ili ovim Zakonom.\n\n"
            "(3) Prekovremeni rad ne smije biti duži od 8 sati tjedno, odnosno 180 sati godišnje."
        ),
        "english": (
            "(1) Overtime work is work performed beyond the full working time established by the "
            "employment contract, general act of the employer or this Act.\n\n"
            "(3) Overtime work may not exceed 8 hours per week, or 180 hours per year."
        ),
        "spanish": (
            "(1) El trabajo de horas extra es el trabajo realizado más allá del tiempo de trabajo "
            "completo establecido por el contrato de trabajo, acto general del empleador o esta Ley.\n\n"
            "(3) El trabajo de horas extra no puede exceder 8 horas por semana, o 180 horas por año."
        ),
        "keywords": [
            "prekovremeni rad", "8 sati", "180 sati", "tjedno", "godišnje", "nadoknada",
            "overtime work", "8 hours", "180 hours", "weekly", "yearly", "compensation",
            "trabajo horas extra", "8 horas", "180 horas", "semanal", "anual", "compensación",
        ],
        "tags": ["working-time", "overtime", "limits", "compensation"],
        "lastUpdated": "2024-08-20",
    },
    {
        "id": "art_006",
        "number": "Članak 73",
        "officialNumber": "Članak 73 (NN 93/14, 98/19)",
        "section": "leave",
        "articleType": "annual",
        "title": "Godišnji odmor",
        "croatian": (
            "(1) Radnik ima pravo na godišnji odmor u trajanju od najmanje četiri tjedna u "
            "kalendarskoj godini.\n\n"
            "(2) Radnik koji kod poslodavca radi kraće od pune kalendarske godine ima pravo na "
            "godišnji odmor razmjerno vremenu provedenom na radu u toj kalendarskoj godini.\n\n"
            "(3) Pravo na godišnji odmor radnik stječe nakon šest mjeseci neprekidnog rada kod "
            "istog poslodavca.\n\n"
            "(4) Godišnji odmor može se koristiti u cijelosti ili u dijelovima, pri čemu jedan dio "
            "mora biti najmanje dva uzastopna tjedna."
        ),
        "english": (
            "(1) A worker has the right to annual leave lasting at least four weeks in a calendar year.\n\n"
            "(2) A worker who works with an employer for less than a full calendar year has the right "
            "to annual leave proportional to the time spent at work in that calendar year.\n\n"
            "(3) The right to annual leave is acquired by a worker after six months of continuous "
            "work with the same employer.\n\n"
            "(4) Annual leave may be used in whole or in parts, whereby one part must be at least "
            "two consecutive weeks."
        ),
        "spanish": (
            "(1) Un trabajador tiene derecho a vacaciones anuales de al menos cuatro semanas en un "
            "año calendario.\n\n"
            "(2) Un trabajador que trabaja con un empleador por menos de un año calendario completo "
            "tiene derecho a vacaciones anuales proporcionales al tiempo dedicado al trabajo en ese "
            "año calendario.\n\n"
            "(3) El derecho a vacaciones anuales se adquiere por un trabajador después de seis meses "
            "de trabajo continuo con el mismo empleador.\n\n"
            "(4) Las vacaciones anuales pueden usarse en su totalidad o en partes, donde una parte "
            "debe ser de al menos dos semanas consecutivas."
        ),
        "keywords": [
            "godišnji odmor", "četiri tjedna", "kalendarska godina", "šest mjeseci", "dva tjedna",
            "annual leave", "four weeks", "calendar year", "six months", "two weeks",
            "vacaciones anuales", "cuatro semanas", "año calendario", "seis meses", "dos semanas",
        ],
        "tags": ["leave", "annual", "vacation", "duration", "rights"],
        "lastUpdated": "2024-08-20",
    },
    {
        "id": "art_007",
        "number": "Članak 113",
        "officialNumber": "Članak 113 (NN 93/14, 127/17)",
        "section": "termination",
        "articleType": "notice",
        "title": "Otkazni rok",
        "croatian": (
            "(1) Otkazni rok je najmanje 14 dana ako je radni odnos trajao kraće od godinu dana, "
            "najmanje mjesec dana ako je radni odnos trajao godinu dana ili duže.\n\n"
            "(3) Otkazni rok počinje teći prvog dana nakon dana dostave otkaza."
        ),
        "english": (
            "(1) The notice period is at least 14 days if the employment relationship lasted less "
            "than one year, at least one month if the employment relationship lasted one year or longer.\n\n"
            "(3) The notice period begins to run on the first day after the day of delivery of notice."
        ),
        "spanish": (
            "(1) El período de aviso es al menos 14 días si la relación laboral duró menos de un año, "
            "al menos un mes si la relación laboral duró un año o más.\n\n"
            "(3) El período de aviso comienza a correr el primer día después del día de entrega del aviso."
        ),
        "keywords": [
            "otkazni rok", "14 dana", "mjesec dana", "tri mjeseca", "50 godina", "pet godina",
            "notice period", "14 days", "one month", "three months", "50 years", "five years",
            "período aviso", "14 días", "un mes", "tres meses", "50 años", "cinco años",
        ],
        "tags": ["termination", "notice", "periods", "age", "seniority"],
        "lastUpdated": "2024-08-20",
    },
    {
        "id": "art_008",
        "number": "Članak 32",
        "officialNumber": "Članak 32 (NN 93/14, 98/19)",
        "section": "protection",
        "articleType": "maternity",
        "title": "Rodiljski dopust",
        "croatian": (
            "(1) Radnica ima pravo na rodiljski dopust u trajanju od 98 dana.\n\n"
            "(2) Rodiljski dopust može početi najranije 28 dana prije predviđenog datuma poroda.\n\n"
            "(3) Radnica je dužna koristiti najmanje 42 dana rodiljskog dopusta nakon poroda."
        ),
        "english": (
            "(1) A female worker has the right to maternity leave for a period of 98 days.\n\n"
            "(2) Maternity leave may begin at the earliest 28 days before the expected date of delivery.\n\n"
            "(3) The female worker is obliged to use at least 42 days of maternity leave after delivery."
        ),
        "spanish": (
            "(1) Una trabajadora tiene derecho a licencia de maternidad por un período de 98 días.\n\n"
            "(2) La licencia de maternidad puede comenzar como máximo 28 días antes de la fecha "
            "esperada de parto.\n\n"
            "(3) La trabajadora está obligada a usar al menos 42 días de licencia de maternidad "
            "después del parto."
        ),
        "keywords": [
            "rodiljski dopust", "98 dana", "28 dana", "42 dana", "blizanci", "trojke",
            "maternity leave", "98 days", "28 days", "42 days", "twins", "triplets",
            "licencia maternidad", "98 días", "28 días", "42 días", "gemelos", "trillizos",
        ],
        "tags": ["protection", "maternity", "leave", "women", "compensation"],
        "lastUpdated": "2024-08-20",
    },
]


def sample_documents() -> List[Document]:
    """Load the sample articles as Documents."""
    return load_documents(SAMPLE_ARTICLES)


__all__ = ["SAMPLE_ARTICLES", "sample_documents"]
