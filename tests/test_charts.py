from __future__ import annotations

from careerfit.charts import build_radar_chart, dimension_frame, dimension_label


def _scores() -> dict[str, int]:
    return {
        "will": 85,
        "interest": 100,
        "skill": 60,
        "cognitive": 70,
        "ability": 85,
        "real_world_fit": 90,
    }


def test_dimension_label():
    assert dimension_label("real_world_fit") == "Real World Fit"
    assert dimension_label("will") == "Will"


def test_radar_chart_closes_outline_and_fixes_axis():
    fig = build_radar_chart(_scores())
    trace = fig.data[0]
    assert list(trace.r) == [85, 100, 60, 70, 85, 90, 85]
    assert list(trace.theta)[0] == list(trace.theta)[-1] == "Will"
    assert "Real World Fit" in trace.theta
    assert list(fig.layout.polar.radialaxis.range) == [0, 100]


def test_dimension_frame():
    frame = dimension_frame(_scores())
    assert list(frame.columns) == ["Dimension", "Score"]
    assert frame["Score"].tolist() == [85, 100, 60, 70, 85, 90]
