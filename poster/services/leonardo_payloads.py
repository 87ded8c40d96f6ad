"""
Request bodies for Leonardo character-reference generations.

The stored `LeonardoModel.style_control` picks the payload family: SDXL-style
models take `photoReal`/`presetStyle`, Phoenix-style models take
`styleUUID`/`contrast`.
"""
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from poster.models import LeonardoModel, StrengthType, StyleControl


@dataclass(frozen=True)
class GenerationParams:
    prompt: str
    init_image_id: str
    strength_type: StrengthType
    width: int
    height: int
    number_of_images: int = 1
    photo_real: bool = False
    alchemy: bool = False
    preset_style: Optional[str] = None
    style_uuid: Optional[str] = None
    contrast: Optional[float] = None


class StyleVariant:
    style_control: StyleControl

    def resolve(self, params: GenerationParams) -> GenerationParams:
        """Return the parameters that will actually be sent and stored."""
        return params

    def style_fields(self, model: LeonardoModel, params: GenerationParams) -> Dict[str, Any]:
        raise NotImplementedError


class PresetStyleVariant(StyleVariant):
    style_control = StyleControl.PRESET_STYLE

    def resolve(self, params: GenerationParams) -> GenerationParams:
        # Leonardo rejects alchemy != photoReal for these models
        return replace(params, alchemy=params.photo_real)

    def style_fields(self, model: LeonardoModel, params: GenerationParams) -> Dict[str, Any]:
        fields: Dict[str, Any] = {"photoReal": params.photo_real}
        if params.photo_real and model.photo_real_version:
            fields["photoRealVersion"] = model.photo_real_version
        if params.preset_style:
            fields["presetStyle"] = params.preset_style
        return fields


class StyleUUIDVariant(StyleVariant):
    style_control = StyleControl.STYLE_UUID

    def style_fields(self, model: LeonardoModel, params: GenerationParams) -> Dict[str, Any]:
        fields: Dict[str, Any] = {}
        if params.style_uuid:
            fields["styleUUID"] = params.style_uuid
        if params.contrast is not None:
            fields["contrast"] = params.contrast
        return fields


VARIANTS: Dict[StyleControl, StyleVariant] = {
    StyleControl.PRESET_STYLE: PresetStyleVariant(),
    StyleControl.STYLE_UUID: StyleUUIDVariant(),
}


def variant_for(model: LeonardoModel) -> StyleVariant:
    return VARIANTS[StyleControl(model.style_control)]


def build_generation_payload(model: LeonardoModel, params: GenerationParams) -> tuple[Dict[str, Any], GenerationParams]:
    """
    Build the `/generations` body for `model`.

    Returns the body together with the resolved parameters, so callers can
    persist exactly what was sent.
    """
    variant = variant_for(model)
    resolved = variant.resolve(params)

    payload: Dict[str, Any] = {
        "height": resolved.height,
        "width": resolved.width,
        "modelId": model.model_id,
        "prompt": resolved.prompt,
        "alchemy": resolved.alchemy,
        "num_images": resolved.number_of_images,
        "controlnets": [
            {
                "initImageId": resolved.init_image_id,
                "initImageType": "UPLOADED",
                "preprocessorId": model.preprocessor_id,
                "strengthType": StrengthType(resolved.strength_type).value,
            }
        ],
    }
    payload.update(variant.style_fields(model, resolved))
    return payload, resolved
