"""
Performance benchmarks for the per-sample gesture path.
A drag produces one sample per pointer move, so each step must stay cheap.
"""
import pytest

from edge_sheet.gestures import replay_samples, resolve_gesture
from edge_sheet.models import (
    Edge,
    GestureSample,
    Offset,
    PanelExtent,
    PanelState,
    decode_samples,
    encode_samples,
)
from edge_sheet.pan_responder import GestureTracker
from edge_sheet.spring import OffsetSpring


def make_trace(count=240):
    samples = [
        GestureSample(
            delta=(-i * 1.5, i * 0.1),
            velocity=0.15,
            direction=(-1.0, 1.0),
            pointer_down=True,
            initial=(600.0, 300.0),
            current=(600.0 - i * 1.5, 300.0 + i * 0.1),
        )
        for i in range(count)
    ]
    samples.append(GestureSample(
        delta=(-count * 1.5, count * 0.1),
        velocity=0.15,
        direction=(-1.0, 1.0),
        pointer_down=False,
    ))
    return samples


@pytest.fixture
def open_state():
    return PanelState(is_open=True, edge=Edge.LEFT, extent=PanelExtent(width=400, height=800))


def test_resolve_gesture_single_sample(benchmark, open_state):
    """Benchmark one engine step while dragging"""
    sample = make_trace(1)[0]

    result = benchmark(resolve_gesture, sample, open_state)
    assert result.immediate is True


def test_replay_full_drag(benchmark, open_state):
    """Benchmark replaying a four-second drag at 60 Hz"""
    trace = make_trace()

    state, resolutions = benchmark(replay_samples, open_state, trace)
    assert len(resolutions) == len(trace)
    assert resolutions[-1].closed is not None


def test_tracker_moves(benchmark):
    """Benchmark turning raw pointer moves into samples"""
    def drag():
        tracker = GestureTracker(Edge.RIGHT)
        tracker.press(100.0, 300.0, timestamp=0.0)
        last = None
        for i in range(1, 241):
            last = tracker.move(100.0 + i * 2, 300.0, timestamp=i * 16.0)
        tracker.release(timestamp=241 * 16.0)
        return last

    result = benchmark(drag)
    assert result.delta == (480.0, 0.0)


def test_trace_decoding(benchmark):
    """Benchmark decoding a recorded trace"""
    data = encode_samples(make_trace())

    result = benchmark(decode_samples, data)
    assert len(result) == 241


def test_spring_settle(benchmark):
    """Benchmark stepping a closing animation to rest in 16ms frames"""
    def settle():
        spring = OffsetSpring()
        spring.animate_to(Offset(x=-400, y=0), initial_velocity=1.2)
        frames = 0
        while not spring.settled:
            spring.step(16)
            frames += 1
        return frames

    frames = benchmark(settle)
    assert frames > 0
