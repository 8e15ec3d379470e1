""" pfctl Engine """
from typing import Iterable, List

from pfhardening import constants
from pfhardening.engines import BaseEngine


class Engine(BaseEngine):
    """pfctl Engine"""

    @property
    def _pfctl(self) -> List[str]:
        return [constants.PFCTL]

    @property
    def _anchor(self) -> List[str]:
        return self._pfctl + ["-a", self.hardening.files.anchor_name]

    def anchor_load(self) -> Iterable[List[str]]:
        """Load the anchor file into the anchor only, leaving the main
        ruleset as it is"""
        yield self._anchor + ["-f", self.hardening.files.anchor_file]

    def engine_enable(self) -> Iterable[List[str]]:
        yield self._pfctl + ["-e"]

    def anchor_show(self) -> Iterable[List[str]]:
        yield self._anchor + ["-sr"]

    def engine_status(self) -> Iterable[List[str]]:
        yield self._pfctl + ["-si"]

    def config_reload(self) -> Iterable[List[str]]:
        yield self._pfctl + ["-f", self.hardening.files.pf_conf]
