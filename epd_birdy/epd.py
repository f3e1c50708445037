from enum import Enum


def _key(text):
    return str(text).strip().replace("_", "").replace(" ", "").lower()


class LifeCyclePhase(Enum):
    """
    EN 15804 life-cycle modules.
    """
    A1 = "A1"  # raw material supply
    A2 = "A2"  # transport to manufacturer
    A3 = "A3"  # manufacturing
    A4 = "A4"  # transport to site
    A5 = "A5"  # construction / installation
    B1 = "B1"
    B2 = "B2"
    B3 = "B3"
    B4 = "B4"
    B5 = "B5"
    B6 = "B6"
    B7 = "B7"
    C1 = "C1"  # deconstruction
    C2 = "C2"
    C3 = "C3"
    C4 = "C4"  # disposal
    D = "D"    # benefits beyond the system boundary

    @classmethod
    def parse(cls, text):
        if isinstance(text, cls):
            return text
        try:
            return cls(str(text).strip().upper())
        except ValueError:
            raise ValueError(f"Unknown life-cycle phase: {text!r}")


class EnvironmentalProductDeclarationField(Enum):
    """
    Indicator columns an EPD reports. The value is the short label used as a
    column header in EPD tables.
    """
    GLOBAL_WARMING_POTENTIAL = "GWP"
    ACIDIFICATION_POTENTIAL = "AP"
    DEPLETION_OF_ABIOTIC_RESOURCES_ELEMENTS = "ADPE"
    DEPLETION_OF_ABIOTIC_RESOURCES_FOSSIL_FUELS = "ADPF"
    EUTROPHICATION_POTENTIAL = "EP"
    OZONE_DEPLETION_POTENTIAL = "ODP"
    PHOTOCHEMICAL_OZONE_CREATION_POTENTIAL = "POCP"
    EMBODIED_ENERGY = "EE"

    @classmethod
    def parse(cls, text):
        """Accepts a member, its name (any casing, e.g. GlobalWarmingPotential) or its label."""
        if isinstance(text, cls):
            return text
        key = _key(text)
        for member in cls:
            if key == _key(member.name) or key == member.value.lower():
                return member
        raise ValueError(f"Unknown EPD field: {text!r}")


class QuantityType(Enum):
    UNDEFINED = "Undefined"
    ITEM = "Item"
    LENGTH = "Length"
    AREA = "Area"
    VOLUME = "Volume"
    MASS = "Mass"
    ENERGY = "Energy"

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, text):
        if isinstance(text, cls):
            return text
        key = _key(text)
        for member in cls:
            if key == member.value.lower():
                return member
        raise ValueError(f"Unknown quantity type: {text!r}")


class IndicatorRecord:
    """
    Impact values an EPD reports for one set of life-cycle phases.
    """
    def __init__(self, phases, metrics=None):
        self.phases = frozenset(LifeCyclePhase.parse(p) for p in phases)
        self.metrics = {
            EnvironmentalProductDeclarationField.parse(k): float(v)
            for k, v in (metrics or {}).items()
        }

    def value(self, field):
        return self.metrics.get(field, 0.0)

    def __repr__(self):
        phases = ",".join(sorted(p.value for p in self.phases))
        return f"IndicatorRecord(phases={phases}, metrics={len(self.metrics)})"


class EnvironmentalProductDeclaration:
    """
    A published EPD: a declared functional unit (quantity type and value)
    and the indicator records reported against it.
    """
    def __init__(self, name, quantity_type, quantity_type_value, records=None):
        self.name = name
        self.quantity_type = QuantityType.parse(quantity_type)
        self.quantity_type_value = quantity_type_value
        self.records = []
        for record in records or []:
            self.add_record(record)

    def add_record(self, record):
        if not isinstance(record, IndicatorRecord):
            raise ValueError(f"Expected an IndicatorRecord, got {type(record).__name__}")
        self.records.append(record)

    def __repr__(self):
        return (f"EnvironmentalProductDeclaration(name={self.name!r}, "
                f"quantity_type={self.quantity_type.value}, "
                f"quantity_type_value={self.quantity_type_value}, records={len(self.records)})")
