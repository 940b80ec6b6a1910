# SPDX-License-Identifier: MIT

from copy import deepcopy
from pathlib import Path
from typing import Any, Optional

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from bizcal import time
from bizcal.errors import FetchError
from bizcal.model.entity_id import EntityId, generate_entity_id
from bizcal.model.reference import Reference


class ReferenceRepository:
    """Named records (projects, clients) stored together in one YAML file."""

    collection = ""

    def __init__(self) -> None:
        self._references: Optional[list[Reference]] = None
        self.is_dirty = False

    def _path(self) -> Path:
        raise NotImplementedError

    @property
    def references(self) -> list[Reference]:
        if self._references is None:
            self.__load_data()
        if self._references is None:
            raise ValueError()
        return self._references

    def __load_data(self) -> None:
        path = self._path()
        if not path.is_file():
            self._references = []
            return
        try:
            data = load(path.read_text(), Loader=Loader)
        except (OSError, YAMLError) as e:
            raise FetchError(f"load {self.collection}", str(e)) from e
        raw_references: list[dict[str, Any]] = (data or {}).get(self.collection) or []
        self._references = []
        for raw_reference in raw_references:
            raw_reference["created"] = time.datetime_from_str(raw_reference["created"])
            self._references.append(raw_reference)  # type: ignore[arg-type]

    def __save_data(self, references: list[Reference]) -> None:
        serializable = []
        for reference in deepcopy(references):
            raw_reference: dict[str, Any] = dict(reference)
            raw_reference["created"] = time.datetime_to_iso_str(reference["created"])
            serializable.append(raw_reference)
        try:
            self._path().write_text(
                dump({self.collection: serializable}, Dumper=Dumper)
            )
        except OSError as e:
            raise FetchError(f"save {self.collection}", str(e)) from e

    def flush(self) -> bool:
        if self._references is not None and self.is_dirty:
            self.__save_data(self._references)
            self.is_dirty = False
            return True
        return False

    def add(self, user_id: str, name: str) -> EntityId:
        self.is_dirty = True
        reference: Reference = {
            "id": generate_entity_id(),
            "user_id": user_id,
            "name": name.strip(),
            "created": time.now_utc(),
        }
        self.references.append(reference)
        return reference["id"]

    def get_all(self, user_id: str) -> list[Reference]:
        return deepcopy(
            sorted(
                (r for r in self.references if r["user_id"] == user_id),
                key=lambda r: r["name"].lower(),
            )
        )

    def get_name(self, id: Optional[EntityId]) -> Optional[str]:
        if id is None:
            return None
        for reference in self.references:
            if reference["id"] == id:
                return reference["name"]
        return None

    def find_by_name(self, user_id: str, name: str) -> Optional[Reference]:
        for reference in self.references:
            if reference["user_id"] == user_id and reference["name"] == name:
                return deepcopy(reference)
        return None
