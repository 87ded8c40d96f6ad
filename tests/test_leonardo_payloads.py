from types import SimpleNamespace

import pytest

from poster.models import StrengthType, StyleControl
from poster.services.leonardo_payloads import GenerationParams, build_generation_payload

SDXL = SimpleNamespace(
    model_id="b24e16ff-06e3-43eb-8d33-4416c2d75876",
    preprocessor_id=133,
    photo_real_version="v2",
    style_control=StyleControl.PRESET_STYLE,
)
PHOENIX = SimpleNamespace(
    model_id="de7d3faf-762f-48e0-b3b7-9d0ac3a3fcf3",
    preprocessor_id=397,
    photo_real_version=None,
    style_control=StyleControl.STYLE_UUID,
)


def params(**overrides):
    values = dict(
        prompt="a knight in the rain",
        init_image_id="init-1",
        strength_type=StrengthType.MID,
        width=1024,
        height=768,
    )
    values.update(overrides)
    return GenerationParams(**values)


@pytest.mark.parametrize("photo_real,alchemy", [(True, False), (False, True), (True, True), (False, False)])
def test_preset_style_forces_alchemy_to_photo_real(photo_real, alchemy):
    payload, resolved = build_generation_payload(SDXL, params(photo_real=photo_real, alchemy=alchemy))

    assert payload["alchemy"] == payload["photoReal"] == photo_real
    assert resolved.alchemy == photo_real


def test_preset_style_payload_shape():
    payload, _ = build_generation_payload(
        SDXL, params(photo_real=True, preset_style="CINEMATIC", number_of_images=2, strength_type=StrengthType.HIGH)
    )

    assert payload == {
        "height": 768,
        "width": 1024,
        "modelId": SDXL.model_id,
        "prompt": "a knight in the rain",
        "alchemy": True,
        "num_images": 2,
        "controlnets": [
            {"initImageId": "init-1", "initImageType": "UPLOADED", "preprocessorId": 133, "strengthType": "High"}
        ],
        "photoReal": True,
        "photoRealVersion": "v2",
        "presetStyle": "CINEMATIC",
    }


def test_preset_style_without_photo_real_omits_version():
    payload, _ = build_generation_payload(SDXL, params(photo_real=False))

    assert payload["photoReal"] is False
    assert "photoRealVersion" not in payload
    assert "presetStyle" not in payload


def test_style_uuid_payload_keeps_caller_alchemy():
    payload, resolved = build_generation_payload(
        PHOENIX, params(alchemy=True, photo_real=False, style_uuid="a5632c7c-ddbb-4e2f-ba34-8456ab3ac436", contrast=3.5)
    )

    assert payload["alchemy"] is True
    assert resolved.alchemy is True
    assert payload["styleUUID"] == "a5632c7c-ddbb-4e2f-ba34-8456ab3ac436"
    assert payload["contrast"] == 3.5
    assert "photoReal" not in payload
    assert payload["controlnets"][0]["preprocessorId"] == 397
