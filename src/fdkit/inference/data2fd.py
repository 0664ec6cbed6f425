"""Infer functional dependencies from observations in tabular data files."""

from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pandas as pd

from fdkit.config.logging import get_logger
from fdkit.core.attrs import AttrSet
from fdkit.core.errors import MalformedDataFile
from fdkit.core.funcdep import FuncDep
from fdkit.core.relation import Relation

logger = get_logger(__name__)


class DataSet:
    """
    Tabular data used to generate functional dependencies.

    Only pairs of columns are examined, so every inferred dependency has a
    single attribute on its left side.
    """

    def __init__(self, name: str, df: pd.DataFrame, exclude: Iterable[str] = ()):
        self.df = df
        excluded = set(exclude)
        self.columns: List[str] = []
        for col in df.columns:
            col = str(col)
            # pandas names blank header cells "Unnamed: N"
            if col.startswith("Unnamed:") or col.strip() == "" or col in excluded:
                continue
            self.columns.append(col)
        self.relation = Relation(name=name, attrs=AttrSet(self.columns))

    @classmethod
    def read(cls, filename: Path, exclude: Iterable[str] = ()) -> "DataSet":
        """
        Load a data file with a single-line header.

        Files ending in .csv are read as CSV, anything else as tab-delimited.
        Values are compared as text. Every row must have as many fields as
        the header.

        Args:
            filename: Path to the data file
            exclude: Attributes to leave out of the relation

        Returns:
            DataSet named after the file stem

        Raises:
            MalformedDataFile: If the file is empty, unparsable, has rows of the
                wrong width or repeats a header name
        """
        filename = Path(filename)
        delimiter = "," if filename.suffix.lower() == ".csv" else "\t"
        try:
            # header=None so the tokenizer rejects rows wider than the header
            raw = pd.read_csv(
                filename,
                sep=delimiter,
                header=None,
                index_col=False,
                dtype=str,
                keep_default_na=False,
            )
        except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
            raise MalformedDataFile(filename, str(e)) from e

        # short rows are padded with NaN; real blanks stay "" without default NA values
        short = raw.isna().any(axis=1)
        if short.any():
            record = int(short.to_numpy().argmax()) + 1
            raise MalformedDataFile(
                filename,
                f"wrong number of fields in record {record}, expected {raw.shape[1]}",
            )

        header = [str(h) for h in raw.iloc[0]]
        named = [h for h in header if h.strip()]
        if len(set(named)) != len(named):
            raise MalformedDataFile(filename, "duplicate column names in header")

        df = raw.iloc[1:].reset_index(drop=True)
        df.columns = header
        logger.info(f"Loaded {len(df)} rows, {len(df.columns)} columns from {filename}")
        return cls(filename.stem, df, exclude=exclude)

    def analyze(self) -> Relation:
        """
        Examine every pair of columns and record the dependencies observed.

        Dependencies sharing a left attribute are merged, so A->B and A->C
        become A->BC.

        Returns:
            The relation with its inferred dependencies
        """
        pair_fds: List[FuncDep] = []
        for i, col_i in enumerate(self.columns):
            for col_j in self.columns[i + 1 :]:
                pair_fds.extend(self.check_column_pair(col_i, col_j))

        merged: Dict[str, FuncDep] = {}
        for fd in pair_fds:
            key = fd.left.to_string()
            if key in merged:
                merged[key].right.add_all(fd.right)
            else:
                merged[key] = fd

        self.relation.func_deps = []
        for fd in merged.values():
            self.relation.add_func_dep(fd)
        logger.info(
            f"{self.relation.name}: inferred {len(self.relation.func_deps)} dependencies "
            f"from {len(pair_fds)} column pair observations"
        )
        return self.relation

    def check_column_pair(self, col_i: str, col_j: str) -> List[FuncDep]:
        """
        Check whether either column functionally determines the other.

        col_j -> col_i holds when every value of col_j co-occurs with a single
        value of col_i, and symmetrically for col_i -> col_j.
        """
        fds = []
        if self._determines(col_j, col_i):
            fds.append(FuncDep.of([col_j], [col_i]))
        if self._determines(col_i, col_j):
            fds.append(FuncDep.of([col_i], [col_j]))
        return fds

    def _determines(self, left: str, right: str) -> bool:
        return bool(self.df.groupby(left, sort=False)[right].nunique().le(1).all())


def infer_relation(filename: Path, exclude: Optional[Iterable[str]] = None) -> Relation:
    """Read a data file and return its relation with inferred dependencies."""
    return DataSet.read(filename, exclude=exclude or ()).analyze()
