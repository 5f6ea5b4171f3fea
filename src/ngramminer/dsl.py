# src/ngramminer/dsl.py
from __future__ import annotations

from typing import List, Tuple

from . import settings
from .model import RunParameters, Step
from .validation import ValidationError

IMPORT_NGRAMS = "ImportNgrams.q"
CREATE_WINDOW = "CreateWindow.q"
SHIFT_WINDOW = "ShiftWindow.q"
EXPORT_DICTIONARY = "ExportDictionary.q"
EXPORT_FOREIGNISMS = "ExportForeignisms.q"
PROCESS_NEOLOGISMS = "ProcessNeologisms.q"
EXPORT_NEOLOGISMS = "ExportNeologisms.q"

HIVE_SCRIPTS = (
    IMPORT_NGRAMS,
    CREATE_WINDOW,
    SHIFT_WINDOW,
    EXPORT_DICTIONARY,
    EXPORT_FOREIGNISMS,
    PROCESS_NEOLOGISMS,
    EXPORT_NEOLOGISMS,
)


# ---------------------------------------------------------------------
# Step helpers
# ---------------------------------------------------------------------

def define(**params: object) -> Tuple[Tuple[str, str], ...]:
    """Hive variable definitions, in call order, with values forced to str."""
    return tuple((k, str(v)) for k, v in params.items())


def hive_step(name: str, script: str, **params: object) -> Step:
    """Create a Hive script step."""
    return Step(name=name, script=script, args=define(**params))


def corpus_location(language: str, corpus_root: str = settings.CORPUS_ROOT) -> str:
    return f"{corpus_root}{language}/{settings.NGRAM_SIZE}/"


# ---------------------------------------------------------------------
# Step sequence builder
# ---------------------------------------------------------------------

class StepSequenceBuilder:
    """
    Expands run parameters into the ordered steps of one job flow.

    Step names are generic and sortable: EMR accepts up to 256 steps in a
    job flow, so they carry a 3-digit sequence number (Step-001, Step-002...).
    The counter belongs to the builder and keeps increasing across calls.

    Example:
        builder = StepSequenceBuilder("s3://bucket/EMR/HiveScripts/",
                                      "s3://bucket/EMR/Output/")
        steps = builder.build(params)
    """

    def __init__(self, scripts_path: str, output_path: str):
        self.scripts_path = scripts_path
        self.output_path = output_path
        self._counter = 1

    def next_name(self) -> str:
        name = f"Step-{self._counter:03d}"
        self._counter += 1
        return name

    def _step(self, script: str, **params: object) -> Step:
        return hive_step(self.next_name(), self.scripts_path + script, **params)

    def dictionary_steps(
        self,
        ngrams_location: str,
        ngrams_table: str,
        from_year: int,
        to_year: int,
        window_size: int,
        percent_of_years: float,
    ) -> List[Step]:
        """
        Steps that build the dictionary of a language and export it.

        Args:
            ngrams_location: S3 location of the 1-grams of the language
            ngrams_table: Name of the Hive table for the language
            from_year: First year of the analysis
            to_year: Last year of the analysis
            window_size: Years spanned by the sliding window
            percent_of_years: Share of the window's years a gram needs

        Returns:
            Import, initial window, one shift per remaining year, export.
            Shifting starts the year after the initial window ends, so a
            window that reaches to_year adds no shift steps.
        """
        steps = [
            self._step(
                IMPORT_NGRAMS,
                ngramsLocation=ngrams_location,
                regex=settings.GRAM_REGEX,
                ngramsTable=ngrams_table,
            ),
            self._step(
                CREATE_WINDOW,
                ngramsTable=ngrams_table,
                fromYear=from_year,
                toYear=from_year + window_size,
            ),
        ]

        # The initial window already ends at from_year + window_size
        for year in range(from_year + window_size + 1, to_year + 1):
            steps.append(self._step(
                SHIFT_WINDOW,
                ngramsTable=ngrams_table,
                newYear=year,
                windowSize=window_size,
            ))

        steps.append(self._step(
            EXPORT_DICTIONARY,
            ngramsTable=ngrams_table,
            windowSize=window_size,
            percentOfYears=percent_of_years,
            output=f"{self.output_path}{ngrams_table}/Dic",
        ))
        return steps

    def foreignism_steps(self, ngrams_table1: str, ngrams_table2: str) -> List[Step]:
        """Compare two dictionaries; output lives under the first table."""
        return [
            self._step(
                EXPORT_FOREIGNISMS,
                ngramsTable1=ngrams_table1,
                ngramsTable2=ngrams_table2,
                output=f"{self.output_path}{ngrams_table1}/Foreignisms/{ngrams_table2}",
            )
        ]

    def neologism_steps(
        self,
        ngrams_table: str,
        from_year: int,
        to_year: int,
        window_size: int,
    ) -> List[Step]:
        steps = [
            self._step(PROCESS_NEOLOGISMS, ngramsTable=ngrams_table, year=year)
            for year in range(from_year + window_size, to_year + 1)
        ]
        steps.append(self._step(
            EXPORT_NEOLOGISMS,
            ngramsTable=ngrams_table,
            output=f"{self.output_path}{ngrams_table}/Neo",
        ))
        return steps

    def build(self, params: RunParameters, corpus_root: str = settings.CORPUS_ROOT) -> List[Step]:
        """
        Full step sequence for one run, in submission order.

        Raises:
            ValidationError: If the sequence exceeds what EMR accepts.
        """
        steps: List[Step] = []
        steps.extend(self.dictionary_steps(
            corpus_location(params.language1, corpus_root),
            params.table1,
            params.from_year,
            params.to_year,
            params.window_size,
            params.percent_of_years,
        ))

        # A language compared with itself has no foreignisms
        if params.cross_language:
            steps.extend(self.dictionary_steps(
                corpus_location(params.language2, corpus_root),
                params.table2,
                params.from_year,
                params.to_year,
                params.window_size,
                params.percent_of_years,
            ))
            steps.extend(self.foreignism_steps(params.table1, params.table2))

        steps.extend(self.neologism_steps(
            params.table1,
            params.from_year,
            params.to_year,
            params.window_size,
        ))

        if len(steps) > settings.MAX_STEPS:
            raise ValidationError(
                kind="step_limit",
                message=(
                    f"The analysis needs {len(steps)} steps but a job flow accepts "
                    f"at most {settings.MAX_STEPS}. Shorten the year range."
                ),
                details={"steps": len(steps), "max_steps": settings.MAX_STEPS},
            )
        return steps
