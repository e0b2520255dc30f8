"""Reading the engine configuration and requests, writing answers as JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable


class ConfigError(Exception):
    """A configuration, request or document file cannot be used."""


def _load_json(path: Path, missing_message: str) -> Any:
    try:
        with open(path, encoding="utf-8") as fh:
            return json.load(fh)
    except OSError as exc:
        raise ConfigError(missing_message) from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path}: invalid JSON: {exc}") from exc


def build_answers(answers: Iterable[Iterable[tuple[int, float]]]) -> dict[str, Any]:
    """Turn per-request (doc_id, rank) pairs into the answers document."""
    requests: dict[str, Any] = {}
    for number, found in enumerate(answers, start=1):
        pairs = [(doc_id, rank) for doc_id, rank in found]
        if not pairs:
            data: dict[str, Any] = {"result": False}
        elif len(pairs) == 1:
            doc_id, rank = pairs[0]
            data = {"result": True, "docid": doc_id, "rank": rank}
        else:
            data = {
                "result": True,
                "relevance": [{"docid": d, "rank": r} for d, r in pairs],
            }
        requests[f"request{number:03d}"] = data
    return {"answers": requests}


class ConverterJSON:
    """Access to config.json, requests.json and answers.json."""

    def __init__(
        self,
        config_path: str | Path = "config.json",
        requests_path: str | Path = "requests.json",
        answers_path: str | Path = "answers.json",
    ) -> None:
        self.config_path = Path(config_path)
        self.requests_path = Path(requests_path)
        self.answers_path = Path(answers_path)

    def _config(self) -> dict[str, Any]:
        data = _load_json(self.config_path, "config file is missing")
        if not isinstance(data, dict) or "config" not in data:
            raise ConfigError("config file is empty")
        return data

    def _setting(self, key: str) -> Any:
        section = self._config()["config"]
        if not isinstance(section, dict) or key not in section:
            raise ConfigError(f"config has no {key!r} setting")
        return section[key]

    def get_text_documents(self) -> list[str]:
        """Return the first line of every file listed under ``files``."""
        files = self._config().get("files")
        if not isinstance(files, list) or not all(isinstance(f, str) for f in files):
            raise ConfigError("config has no list of files")
        documents = []
        for name in files:
            try:
                with open(name, encoding="utf-8") as fh:
                    line = fh.readline()
            except OSError as exc:
                raise ConfigError(f"file is not open: {name}") from exc
            documents.append(line.removesuffix("\n"))
        return documents

    def get_name(self) -> str:
        """Return the engine name from the config section."""
        name = self._setting("name")
        if not isinstance(name, str):
            raise ConfigError("config name must be a string")
        return name

    def get_responses_limit(self) -> int:
        """Return the maximum number of answers per request."""
        limit = self._setting("max_responses")
        if isinstance(limit, bool) or not isinstance(limit, int):
            raise ConfigError("max_responses must be an integer")
        return limit

    def get_requests(self) -> list[str]:
        """Return the search requests from the requests file."""
        data = _load_json(self.requests_path, "requests file is missing")
        requests = data.get("requests") if isinstance(data, dict) else None
        if not isinstance(requests, list) or not all(isinstance(r, str) for r in requests):
            raise ConfigError("requests file has no list of requests")
        return list(requests)

    def put_answers(self, answers: Iterable[Iterable[tuple[int, float]]]) -> None:
        """Write the search results to the answers file."""
        with open(self.answers_path, "w", encoding="utf-8") as fh:
            json.dump(build_answers(answers), fh, indent=4, sort_keys=True)
            fh.write("\n")