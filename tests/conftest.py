import pytest
from core.components.resistor import ResistorComponent
from core.components.switch import SwitchComponent
from core.components.voltage_source import VoltageSourceComponent


def R(comp_id, start, end, resistance, rating="1/4W"):
    return ResistorComponent(comp_id, start, end, resistance=resistance, power_rating=rating)


def V(comp_id, start, end, voltage):
    return VoltageSourceComponent(comp_id, start, end, voltage=voltage)


def S(comp_id, start, end, is_open=False):
    return SwitchComponent(comp_id, start, end, is_open=is_open)


@pytest.fixture
def single_loop():
    # 9 V across 1 kOhm, ground at the source's negative terminal
    return [V("V1", "1", "0", 9), R("R1", "1", "0", 1000)]


@pytest.fixture
def ladder():
    return [
        V("V1", "1", "0", 9),
        R("R1", "1", "2", 1000, "1/4W"),
        R("R2", "2", "0", 2000, "1/4W"),
        R("R3", "2", "3", 500, "1/8W"),
        R("R4", "3", "0", 1000, "1/4W"),
    ]


@pytest.fixture
def bridge():
    # Unbalanced Wheatstone bridge with a floating-polarity source
    return [
        V("V1", "top", "gnd", 10),
        R("Ra", "top", "a", 100),
        R("Rb", "top", "b", 220),
        R("Rc", "a", "gnd", 330),
        R("Rd", "b", "gnd", 470),
        R("Rm", "a", "b", 1000),
        V("V2", "b", "c", -2),
        R("Re", "c", "gnd", 680),
    ]
