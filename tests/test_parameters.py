from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from gear.items.parameters import Parameter, ParameterCollection, ParameterType, ParameterValue
from gear.sheets.content import build_collection


def _base_params():
    collection = build_collection(
        {
            "BaseParam": [
                {"key": 6, "Name": "Piety"},
                {"key": 27, "Name": "Critical Hit"},
            ]
        }
    )
    sheet = collection.get_sheet("BaseParam")
    return sheet[6], sheet[27]


def test_add_parameter_value_groups_by_stat():
    piety, crit = _base_params()
    parameters = ParameterCollection()
    parameters.add_parameter_value(piety, ParameterValue(ParameterType.BASE, 20))
    parameters.add_parameter_value(crit, ParameterValue(ParameterType.BASE, 5))
    parameters.add_parameter_value(piety, ParameterValue(ParameterType.HQ, 10))

    assert len(parameters) == 2
    assert [p.base_param for p in parameters] == [piety, crit]
    assert parameters.values_for(piety) == (
        ParameterValue(ParameterType.BASE, 20),
        ParameterValue(ParameterType.HQ, 10),
    )


def test_same_type_may_repeat_for_one_stat():
    piety, _ = _base_params()
    parameters = ParameterCollection()
    parameters.add_parameter_value(piety, ParameterValue(ParameterType.BASE, 1))
    parameters.add_parameter_value(piety, ParameterValue(ParameterType.BASE, 2))

    assert len(parameters[piety]) == 2
    assert parameters[piety].value_of(ParameterType.BASE).amount == 1
    assert parameters.total(piety, ParameterType.BASE) == 3


def test_lookup_of_missing_stat_is_empty():
    piety, crit = _base_params()
    parameters = ParameterCollection()
    parameters.add_parameter_value(piety, ParameterValue(ParameterType.BASE, 1))

    assert crit not in parameters
    assert parameters.get(crit) is None
    assert parameters.values_for(crit) == ()
    assert parameters.total(crit) == 0


def test_add_range_copies_values_without_touching_source():
    piety, crit = _base_params()
    source = [
        Parameter(piety, [ParameterValue(ParameterType.BASE, 20), ParameterValue(ParameterType.HQ, 4)]),
        Parameter(crit, [ParameterValue(ParameterType.SET_BONUS, 7)]),
    ]
    parameters = ParameterCollection()
    parameters.add_range(source)
    parameters.add_parameter_value(piety, ParameterValue(ParameterType.SANCTION, 1))

    assert len(source[0]) == 2
    assert [v.type for v in parameters[piety]] == [
        ParameterType.BASE,
        ParameterType.HQ,
        ParameterType.SANCTION,
    ]
    assert parameters.values() == [
        (piety, ParameterValue(ParameterType.BASE, 20)),
        (piety, ParameterValue(ParameterType.HQ, 4)),
        (piety, ParameterValue(ParameterType.SANCTION, 1)),
        (crit, ParameterValue(ParameterType.SET_BONUS, 7)),
    ]


def test_parameter_total_filters_by_type():
    piety, _ = _base_params()
    parameter = Parameter(
        piety,
        [ParameterValue(ParameterType.BASE, 20), ParameterValue(ParameterType.HQ, 4)],
    )
    assert parameter.total() == 24
    assert parameter.total(ParameterType.HQ) == 4
    assert parameter.value_of(ParameterType.SANCTION) is None


def test_parameter_values_are_immutable():
    value = ParameterValue(ParameterType.BASE, 3)
    with pytest.raises(FrozenInstanceError):
        value.amount = 4  # type: ignore[misc]
