"""Pure functions for turning a template and its answers into generation requests."""

from __future__ import annotations

import string
from collections.abc import Sequence

from template_studio.l1_entities.answers import TemplateAnswers
from template_studio.l1_entities.asset import AssetGenerationRequest, AssetType
from template_studio.l1_entities.errors import UnresolvedPlaceholderError
from template_studio.l1_entities.template import ContentTemplate

_FORMATTER = string.Formatter()

STYLE_MODIFIERS: dict[str, dict[AssetType, str]] = {
    'modern-minimal': {
        AssetType.BACKGROUND: 'clean geometric patterns, minimalist design, subtle gradients',
        AssetType.LOGO: 'simple iconic shapes, clean typography, minimal elements',
        AssetType.TEXT_OVERLAY: 'clean frames, minimal borders, geometric shapes',
        AssetType.DECORATIVE: 'simple geometric elements, clean lines, minimal patterns',
    },
    'bold-vibrant': {
        AssetType.BACKGROUND: 'dynamic patterns, energetic designs, high contrast elements',
        AssetType.LOGO: 'bold shapes, strong typography, dynamic elements',
        AssetType.TEXT_OVERLAY: 'bold frames, dynamic borders, energetic elements',
        AssetType.DECORATIVE: 'vibrant shapes, dynamic patterns, energetic graphics',
    },
    'professional-corporate': {
        AssetType.BACKGROUND: 'subtle patterns, professional textures, corporate elements',
        AssetType.LOGO: 'trustworthy symbols, professional typography, established feel',
        AssetType.TEXT_OVERLAY: 'professional frames, corporate borders, business elements',
        AssetType.DECORATIVE: 'professional icons, corporate patterns, business graphics',
    },
    'warm-friendly': {
        AssetType.BACKGROUND: 'organic patterns, welcoming textures, community elements',
        AssetType.LOGO: 'friendly symbols, approachable typography, welcoming feel',
        AssetType.TEXT_OVERLAY: 'warm frames, friendly borders, inviting elements',
        AssetType.DECORATIVE: 'organic shapes, friendly patterns, welcoming graphics',
    },
    'luxury-elegant': {
        AssetType.BACKGROUND: 'sophisticated patterns, premium textures, elegant elements',
        AssetType.LOGO: 'refined symbols, elegant typography, premium feel',
        AssetType.TEXT_OVERLAY: 'elegant frames, sophisticated borders, premium elements',
        AssetType.DECORATIVE: 'refined shapes, elegant patterns, luxury graphics',
    },
    'playful-creative': {
        AssetType.BACKGROUND: 'artistic patterns, creative textures, imaginative elements',
        AssetType.LOGO: 'creative symbols, artistic typography, imaginative feel',
        AssetType.TEXT_OVERLAY: 'artistic frames, creative borders, imaginative elements',
        AssetType.DECORATIVE: 'creative shapes, artistic patterns, imaginative graphics',
    },
}

FALLBACK_MODIFIERS: dict[AssetType, str] = {
    AssetType.BACKGROUND: 'professional patterns',
    AssetType.LOGO: 'clean symbols',
    AssetType.TEXT_OVERLAY: 'simple frames',
    AssetType.DECORATIVE: 'complementary elements',
}


def resolve_prompt(template: ContentTemplate, answers: TemplateAnswers) -> str:
    """Substitute every ``{question_id}`` in the prompt template with its answer.

    Unanswered optional questions render as an empty string. A placeholder
    naming no declared question, or a required question without an answer,
    raises UnresolvedPlaceholderError.
    """
    parts: list[str] = []
    for literal, field_name, _, _ in _FORMATTER.parse(template.prompt_template):
        parts.append(literal)
        if field_name is None:
            continue
        question = template.question(field_name)
        if question is None:
            raise UnresolvedPlaceholderError(template.id, field_name)
        answer = answers.get(field_name)
        if answer is None:
            if question.required:
                raise UnresolvedPlaceholderError(template.id, field_name)
            parts.append('')
        else:
            parts.append(answer.as_prompt_text())
    return ''.join(parts)


def asset_directive(asset_type: AssetType, industry: str, style: str, palette: Sequence[str]) -> str:
    """Per-type art direction so every asset of one session shares a style and palette.

    Unknown styles fall back to a neutral modifier set.
    """
    modifier = STYLE_MODIFIERS.get(style, FALLBACK_MODIFIERS)[asset_type]
    colors = ', '.join(palette)
    aesthetic = style.replace('-', ' ', 1)
    if asset_type == AssetType.BACKGROUND:
        return (
            f'Create a {modifier} background design for a {industry} business. Use primary colors: {colors}. '
            f'Professional, clean, suitable for marketing materials. {aesthetic} aesthetic. No text or logos.'
        )
    if asset_type == AssetType.LOGO:
        return (
            f'Design {modifier} for a {industry} business. Primary colors: {colors}. '
            f'Modern, memorable, scalable design that reflects {industry} industry. {aesthetic} style. '
            'Simple, iconic, professional. No text unless stylized.'
        )
    if asset_type == AssetType.TEXT_OVERLAY:
        return (
            f'Create {modifier} for marketing materials. Colors: {colors}. '
            'Include call-to-action containers, promotional badges, and text frames '
            f'that match the {aesthetic} aesthetic. No actual text content, just decorative frames.'
        )
    return (
        f'Design {modifier} for {industry} marketing materials. Colors: {colors}. '
        f'Complementary shapes, icons, patterns that enhance the {aesthetic} theme. '
        f'Industry-appropriate symbols and motifs for {industry} business.'
    )


def build_generation_requests(
    template: ContentTemplate,
    answers: TemplateAnswers,
    style: str,
    palette: Sequence[str],
) -> list[AssetGenerationRequest]:
    """One request per asset type the template asks for, in template order.

    Each prompt is the resolved questionnaire prompt followed by that asset
    type's art direction.
    """
    prompt = resolve_prompt(template, answers)
    return [
        AssetGenerationRequest(
            type=asset_type,
            prompt=f'{prompt}\n\n{asset_directive(asset_type, template.industry, style, palette)}',
            style=style,
            color_palette=tuple(palette),
            industry=template.industry,
            sequence_index=idx,
        )
        for idx, asset_type in enumerate(template.asset_types)
    ]
