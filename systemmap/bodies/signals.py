from dataclasses import dataclass
from typing import Union

from .metadata import BodyMetadata, RawMetadata


@dataclass(frozen=True)
class BodySignals:
    human: int = 0
    guardian: int = 0
    thargoid: int = 0

    @property
    def total(self) -> int:
        return self.human + self.guardian + self.thargoid


def parse_body_signals(source: Union[BodyMetadata, RawMetadata]) -> BodySignals:
    """
    Count the human, guardian and thargoid signals reported for a body.

    Signal types are matched case-insensitively by substring, so both "Human" and the journal
    form "$SAA_SignalType_Human;" count as human signals. An entry without a count counts once.
    Missing or malformed metadata yields zero counts.
    """
    metadata = source if isinstance(source, BodyMetadata) else BodyMetadata.from_raw_json(source)

    human = guardian = thargoid = 0
    for signal in metadata.signals:
        signal_type = signal.signal_type.lower()
        count = 1 if signal.count is None else signal.count
        if "human" in signal_type:
            human += count
        elif "guardian" in signal_type:
            guardian += count
        elif "thargoid" in signal_type:
            thargoid += count

    return BodySignals(human=human, guardian=guardian, thargoid=thargoid)
