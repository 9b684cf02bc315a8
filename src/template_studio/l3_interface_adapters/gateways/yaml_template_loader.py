"""Gateway: YAML template loader — implements TemplateLoader port."""

from __future__ import annotations

from importlib import resources
from pathlib import Path

import yaml

from template_studio.l1_entities.template import ContentTemplate, TemplateOrigin
from template_studio.l3_interface_adapters.gateways.paths import USER_TEMPLATES_DIR

_TEMPLATES_DIR = resources.files('template_studio') / 'templates'


def builtin_names() -> set[str]:
    """Discover built-in template keys from the templates directory."""
    return {p.name.removesuffix('.yaml') for p in _TEMPLATES_DIR.iterdir() if p.name.endswith('.yaml')}


def user_template_files() -> list[Path]:
    """YAML files in the user templates directory, sorted by name."""
    if not USER_TEMPLATES_DIR.is_dir():
        return []
    return sorted(p for p in USER_TEMPLATES_DIR.iterdir() if p.name.endswith(('.yaml', '.yml')))


class YamlTemplateLoader:
    """Loads ContentTemplate from packaged built-ins or user YAML files.

    The file key doubles as the template id: ``automotive.yaml`` → ``automotive``.
    """

    def load_builtins(self) -> list[ContentTemplate]:
        return [_load_builtin(name) for name in sorted(builtin_names())]

    def load_file(self, path: str, owner_id: str) -> ContentTemplate:
        file = Path(path)
        if not file.is_file():
            raise FileNotFoundError(f'Template file not found: {file}')
        data = yaml.safe_load(file.read_text(encoding='utf-8')) or {}
        data.setdefault('id', file.stem)
        data['origin'] = TemplateOrigin.CUSTOM.value
        data['owner_id'] = owner_id
        return ContentTemplate.model_validate(data)

    def load_user_templates(self, owner_id: str) -> list[ContentTemplate]:
        """Load every YAML in the user templates directory as *owner_id*'s custom templates."""
        return [self.load_file(str(p), owner_id) for p in user_template_files()]


def _load_builtin(name: str) -> ContentTemplate:
    template_file = _TEMPLATES_DIR / f'{name}.yaml'
    data = yaml.safe_load(template_file.read_text(encoding='utf-8')) or {}
    data['id'] = name
    data['origin'] = TemplateOrigin.BUILT_IN.value
    data.pop('owner_id', None)
    return ContentTemplate.model_validate(data)
