import numpy as np

from helpers import document, rgba
from sealcut.models import ProcessingSettings
from sealcut.processors.pipeline import process_seal
from sealcut.processors.tracer import RunLengthTracer


def test_extract_only():
    result = process_seal(rgba(document()))
    assert result.seal.size == (8, 6)
    assert result.upscaled is None
    assert result.svg is None
    assert result.coverage == 6 / 48
    assert result.final_image is result.seal


def test_full_pipeline_traces_upscaled_image():
    result = process_seal(
        rgba(document()),
        ProcessingSettings(),
        scale=2,
        vectorize=True,
        tracer=RunLengthTracer(),
    )
    assert result.upscaled.size == (16, 12)
    assert result.final_image is result.upscaled
    assert 'viewBox="0 0 16 12"' in result.svg
    assert result.tracer == "run-length"


def test_scale_of_one_skips_upscaling():
    assert process_seal(rgba(document()), scale=1).upscaled is None


def test_default_tracer_reports_which_tracer_ran():
    result = process_seal(rgba(document()), vectorize=True)
    assert result.tracer in {"vtracer", "run-length"}
    assert "<svg" in result.svg


def test_unreadable_image():
    result = process_seal(None)
    assert result.seal is None
    assert result.svg is None


def test_black_mode_pipeline():
    result = process_seal(document(), ProcessingSettings.for_mode("black"))
    arr = np.array(result.seal)
    assert (arr[arr[:, :, 3] == 255][:, :3] == (30, 41, 59)).all()
