# birdcraft/params.py
"""
PARAMS: THE BIRD SHAPE DESCRIPTOR
=================================

PURPOSE:
--------
A bird is fully described by 22 continuous shape parameters, grouped by
anatomical section (beak, head, belly, tail, cutoff). Everything else in the
package is a function of this vector:

    BirdParams ──► geometry.build_bird()  ──► head mesh + body mesh
    BirdParams ◄─► seed.encode_seed()/decode_seed()  ◄─► "m.15.80.5.10.h..."
    BirdParams ×2 ──► breed.breed()       ──► child BirdParams

FIELD TABLE:
------------
Each field has a documented interval used for slider bounds and for
randomization. The interval is NOT enforced: mutation, hand-written seeds
and API callers may push a value outside it, and the geometry builder is
expected to cope.

`FIELDS` lists one ParamField per parameter in seed order. Code that needs
to visit every parameter (breeding, randomization, the API schema) loops over
this table instead of naming the 22 fields again.
"""

from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, List, Tuple


SECTIONS: Tuple[str, ...] = ('beak', 'head', 'belly', 'tail', 'cutoff')


@dataclass
class BirdParams:
    """
    Parameters defining a bird.

    Beak:
    -----
    beak_length : float
        Length of the beak [0, 50]
    beak_size : float
        Beak thickness as a ratio (%) of the head size [20, 100]
    beak_width : float
        Width of the beak tip, 0 is pointy [0, 25]
    beak_roundness : float
        Shape of the beak tip, lowest is flat [10, 200]

    Head:
    -----
    head_size : float
        Head diameter [10, 40]
    head_to_belly : float
        Horizontal distance from head to main body [-20, 50]
    eye_size : float
        Eye diameter, 0 disables the eyes [0, 20]
    head_lateral_offset : float
        Sideways offset of the head [-15, 15]
    head_level : float
        Head height above the belly center [0, 80]
    head_yaw : float
        Horizontal head rotation in degrees [-45, 45]
    head_pitch : float
        Vertical head rotation in degrees, positive is upwards [-80, 45]

    Belly:
    ------
    belly_length : float
        Length of the front body [10, 100]
    belly_size : float
        Belly section diameter [20, 60]
    belly_fat : float
        Additional fatness ratio (%) [50, 150]
    belly_to_bottom : float
        Distance from belly center to bottom center [1, 50]
    bottom_size : float
        Bottom diameter [5, 50]

    Tail:
    -----
    tail_length : float
        Tail length [0, 100]
    tail_width : float
        Tail width [1, 50]
    tail_yaw : float
        Horizontal tail rotation in degrees [-45, 45]
    tail_pitch : float
        Vertical tail angle in degrees, positive is upwards [-45, 90]
    tail_roundness : float
        How round the tail is, lowest is flat [10, 200]

    Cutoff:
    -------
    base_flat : float
        Height of the flat printing base [-100, 100]; -100 disables the cut
    """
    # Beak
    beak_length: float = 15.0
    beak_size: float = 80.0
    beak_width: float = 5.0
    beak_roundness: float = 10.0

    # Head
    head_size: float = 22.0
    head_to_belly: float = 32.0
    eye_size: float = 7.0
    head_lateral_offset: float = 4.0
    head_level: float = 32.0
    head_yaw: float = 10.0
    head_pitch: float = 9.0

    # Belly
    belly_length: float = 60.0
    belly_size: float = 40.0
    belly_fat: float = 90.0
    belly_to_bottom: float = 25.0
    bottom_size: float = 25.0

    # Tail
    tail_length: float = 50.0
    tail_width: float = 22.0
    tail_yaw: float = -5.0
    tail_pitch: float = 40.0
    tail_roundness: float = 80.0

    # Cutoff
    base_flat: float = 100.0

    def copy(self) -> 'BirdParams':
        return BirdParams(**self.to_dict())

    def copy_from(self, other: 'BirdParams') -> 'BirdParams':
        """Overwrite every field with the value from another bird."""
        for entry in FIELDS:
            entry.set(self, entry.get(other))
        return self

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BirdParams':
        """
        Build a bird from a (possibly partial) mapping of field values.

        Missing fields keep their defaults; unknown keys raise KeyError.
        """
        unknown = set(data) - set(FIELD_BY_NAME)
        if unknown:
            raise KeyError(f"Unknown bird parameters: {sorted(unknown)}")
        params = cls()
        for name, value in data.items():
            FIELD_BY_NAME[name].set(params, value)
        return params

    def out_of_range(self) -> List[str]:
        """Names of fields currently outside their documented interval."""
        return [entry.name for entry in FIELDS if not entry.contains(entry.get(self))]


@dataclass(frozen=True)
class ParamField:
    """
    One row of the field table: where a parameter lives and its bounds.

    get()/set() are the accessor pair used by every loop over the table.
    """
    name: str
    section: str
    low: float
    high: float
    default: float
    description: str

    def get(self, params: BirdParams) -> float:
        return getattr(params, self.name)

    def set(self, params: BirdParams, value: float) -> None:
        setattr(params, self.name, float(value))

    def contains(self, value: float) -> bool:
        return self.low <= value <= self.high


def _field(name: str, section: str, low: float, high: float, description: str) -> ParamField:
    default = _DEFAULTS[name]
    return ParamField(name, section, low, high, default, description)


_DEFAULTS = {f.name: f.default for f in fields(BirdParams)}

FIELDS: Tuple[ParamField, ...] = (
    _field('beak_length', 'beak', 0.0, 50.0, "Length of the beak"),
    _field('beak_size', 'beak', 20.0, 100.0, "Beak ratio relative to the head size (%)"),
    _field('beak_width', 'beak', 0.0, 25.0, "Width of the beak tip (0 is pointy)"),
    _field('beak_roundness', 'beak', 10.0, 200.0, "Shape of the beak tip (lowest is flat)"),

    _field('head_size', 'head', 10.0, 40.0, "Head diameter"),
    _field('head_to_belly', 'head', -20.0, 50.0, "Horizontal distance from head to main body"),
    _field('eye_size', 'head', 0.0, 20.0, "Size of the eyes"),
    _field('head_lateral_offset', 'head', -15.0, 15.0, "Head lateral offset"),
    _field('head_level', 'head', 0.0, 80.0, "Head vertical height"),
    _field('head_yaw', 'head', -45.0, 45.0, "Head horizontal rotation"),
    _field('head_pitch', 'head', -80.0, 45.0, "Head vertical rotation (positive is upwards)"),

    _field('belly_length', 'belly', 10.0, 100.0, "How long is the front body"),
    _field('belly_size', 'belly', 20.0, 60.0, "Belly section size"),
    _field('belly_fat', 'belly', 50.0, 150.0, "Additional fatness ratio (%)"),
    _field('belly_to_bottom', 'belly', 1.0, 50.0, "Distance from main body center to bottom center"),
    _field('bottom_size', 'belly', 5.0, 50.0, "Bottom diameter"),

    _field('tail_length', 'tail', 0.0, 100.0, "Tail length"),
    _field('tail_width', 'tail', 1.0, 50.0, "How large is the tail"),
    _field('tail_yaw', 'tail', -45.0, 45.0, "Tail horizontal rotation"),
    _field('tail_pitch', 'tail', -45.0, 90.0, "Tail vertical angle (positive is upwards)"),
    _field('tail_roundness', 'tail', 10.0, 200.0, "How round is the tail (lowest is flat)"),

    _field('base_flat', 'cutoff', -100.0, 100.0, "How to cut the base of the object (-100 disables)"),
)

FIELD_BY_NAME: Dict[str, ParamField] = {entry.name: entry for entry in FIELDS}


def fields_in_section(section: str) -> Tuple[ParamField, ...]:
    """Fields belonging to one anatomical section, in seed order."""
    if section not in SECTIONS:
        raise ValueError(f"Unknown section: {section}")
    return tuple(entry for entry in FIELDS if entry.section == section)
