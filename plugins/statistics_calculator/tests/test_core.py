import statistics

import numpy as np
import pytest

from plugins.statistics_calculator.core import (
    NoValidDataError,
    StatisticsOverflowError,
    analyze,
    describe,
    format_number,
    parse_sample,
)


def test_summary_of_one_to_five():
    result = analyze("1,2,3,4,5")
    assert result.count == 5
    assert result.sum == 15
    assert result.mean == 3
    assert result.median == 3
    assert result.min == 1 and result.max == 5
    assert result.range == 4
    assert result.variance == 2
    assert result.std_dev == pytest.approx(1.4142, abs=1e-4)
    assert result.mode == ()


def test_parse_accepts_mixed_separators_and_skips_garbage():
    assert parse_sample(" 1, 2\n3\t\t4 ,, abc 5e1 -0.5 .25 nan inf") == [
        1.0,
        2.0,
        3.0,
        4.0,
        50.0,
        -0.5,
        0.25,
    ]


def test_no_numeric_tokens_raises():
    with pytest.raises(NoValidDataError):
        analyze("foo, bar ,,")
    with pytest.raises(NoValidDataError):
        analyze("")


def test_even_count_median_averages_middle_pair():
    assert analyze("4 1 3 2").median == 2.5


def test_variance_is_population_variance():
    data = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
    result = describe(data)
    assert result.variance == pytest.approx(statistics.pvariance(data))
    assert result.variance == pytest.approx(np.var(data))
    assert result.std_dev == pytest.approx(2.0)


def test_single_mode():
    assert analyze("1 2 2 3").mode == (2.0,)


def test_multiple_modes_are_sorted():
    assert analyze("5 5 1 1 3").mode == (1.0, 5.0)


def test_uniform_frequencies_have_no_mode():
    assert analyze("1 1 2 2 3 3").mode == ()
    assert analyze("42").mode == ()
    assert analyze("7 7 7").mode == ()


def test_to_dict_and_formatted_views():
    result = analyze("1 2 2")
    payload = result.to_dict()
    assert payload["mode"] == [2.0]
    assert payload["count"] == 3
    formatted = result.formatted()
    assert formatted["mean"] == "1.6667"
    assert formatted["count"] == "3"
    assert formatted["mode"] == ["2"]


def test_format_number_trims_trailing_zeros():
    assert format_number(2.5) == "2.5"
    assert format_number(100.0) == "100"
    assert format_number(-0.0) == "0"
    assert format_number(1 / 3) == "0.3333"


def test_overflowing_summaries_are_rejected():
    with pytest.raises(StatisticsOverflowError):
        analyze("1e308 1e308")
    with pytest.raises(StatisticsOverflowError):
        analyze("-1e308, 1e308")
    with pytest.raises(StatisticsOverflowError):
        analyze("1e200 3e200")


def test_large_but_representable_values_still_work():
    result = analyze("1e150 3e150")
    assert result.mean == pytest.approx(2e150)
    assert result.variance == pytest.approx(1e300)
