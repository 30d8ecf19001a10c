"""
Prompt Template Engine for image generation prompts.
Handles template loading, rendering, and validation.
"""
import yaml
from typing import Dict, Any, Optional, List
from pathlib import Path
from jinja2 import Environment, StrictUndefined, TemplateError
from dataclasses import dataclass

from app.core.exceptions import ConfigurationError
from app.utils.logging import CorrelatedLogger


@dataclass
class PromptConfig:
    """Configuration for a single prompt template."""
    name: str
    template: str
    default_label: str


class PromptTemplateEngine:
    """
    Template engine for managing and rendering image generation prompts.

    Prompts live in ``prompts/<prompt_type>/<variant>.yaml``; each file holds a
    Jinja2 ``template`` and the ``default_label`` reported when the model
    returns no text of its own.
    """

    def __init__(self, config_dir: Optional[str] = None):
        """
        Initialize the template engine.

        Args:
            config_dir: Path to configuration directory. Defaults to app/config/
        """
        self.logger = CorrelatedLogger(__name__)

        if config_dir is None:
            config_dir = Path(__file__).parent.parent

        self.config_dir = Path(config_dir)
        self.prompts_dir = self.config_dir / "prompts"

        self.jinja_env = Environment(
            trim_blocks=True,
            lstrip_blocks=True,
            autoescape=False,
            undefined=StrictUndefined
        )

        # Cache for loaded configurations
        self._config_cache: Dict[str, PromptConfig] = {}

        self.logger.info(f"PromptTemplateEngine initialized with config_dir: {config_dir}")

    def load_prompt_config(self, prompt_type: str, variant: str) -> PromptConfig:
        """
        Load prompt configuration for a prompt type and variant.

        Raises:
            ConfigurationError: If configuration cannot be loaded
        """
        cache_key = f"{prompt_type}/{variant}"

        if cache_key in self._config_cache:
            return self._config_cache[cache_key]

        config_path = self.prompts_dir / prompt_type / f"{variant}.yaml"

        if not config_path.exists():
            raise ConfigurationError(
                f"Prompt configuration {cache_key}",
                f"not found (available: {', '.join(self.get_available_variants(prompt_type)) or 'none'})"
            )

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Prompt configuration {cache_key}", f"could not be loaded: {e}")

        config = self._build_prompt_config(cache_key, config_data)
        self._config_cache[cache_key] = config

        self.logger.info(f"Loaded prompt configuration: {cache_key}")
        return config

    def render_prompt(self, prompt_type: str, variant: str, **template_vars) -> str:
        """Render a prompt with the given template variables."""
        config = self.load_prompt_config(prompt_type, variant)

        try:
            prompt = self.jinja_env.from_string(config.template).render(**template_vars)
        except TemplateError as e:
            raise ConfigurationError(f"Prompt template {config.name}", f"failed to render: {e}")

        prompt = prompt.strip()
        self.logger.debug(f"Rendered prompt for {config.name} ({len(prompt)} chars)")
        return prompt

    def get_default_label(self, prompt_type: str, variant: str) -> str:
        """Label reported as the prompt used when the model returns no text."""
        return self.load_prompt_config(prompt_type, variant).default_label

    def get_available_variants(self, prompt_type: str) -> List[str]:
        """Get the variants available for a prompt type."""
        prompt_dir = self.prompts_dir / prompt_type

        if not prompt_dir.exists():
            return []

        return sorted(
            item.stem for item in prompt_dir.iterdir()
            if item.is_file() and item.suffix == '.yaml'
        )

    def _build_prompt_config(self, name: str, config_data: Dict[str, Any]) -> PromptConfig:
        """Build PromptConfig object from raw configuration data."""
        template = config_data.get('template', '')
        if not template.strip():
            raise ConfigurationError(f"Prompt configuration {name}", "has an empty template")

        return PromptConfig(
            name=name,
            template=template,
            default_label=config_data.get('default_label', name)
        )


# Global template engine instance
_template_engine = None

def get_template_engine() -> PromptTemplateEngine:
    """Get global template engine instance (singleton pattern)."""
    global _template_engine
    if _template_engine is None:
        _template_engine = PromptTemplateEngine()
    return _template_engine
