"""
Prompts manager
Loads prompt templates for each scene from YAML files.
"""

import logging
from pathlib import Path
from typing import Dict, Optional

import yaml

logger = logging.getLogger(__name__)


class PromptsManager:
    """Loads and serves prompt templates, one YAML file per scene."""

    def __init__(self, prompts_dir: Optional[str] = None):
        """
        Args:
            prompts_dir: directory holding the YAML prompt files. Defaults to
                the directory bundled with this module.
        """
        if prompts_dir:
            self.prompts_dir = Path(prompts_dir)
        else:
            self.prompts_dir = Path(__file__).resolve().parent

        self.prompts_cache: Dict[str, Dict] = {}
        self._load_all_prompts()

    def _load_all_prompts(self):
        """Load every *.yaml / *.yml file in the prompts directory."""
        if not self.prompts_dir.exists():
            logger.warning(f"Prompts directory does not exist: {self.prompts_dir}")
            return

        yaml_files = list(self.prompts_dir.glob("*.yaml")) + list(self.prompts_dir.glob("*.yml"))
        for yaml_file in yaml_files:
            if yaml_file.name.startswith("_"):
                continue

            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    prompts_data = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                logger.error(f"Failed to load prompts file {yaml_file}: {e}")
                continue

            if prompts_data:
                # File stem is the scene name
                scene_name = yaml_file.stem
                self.prompts_cache[scene_name] = prompts_data
                logger.info(f"Loaded prompts: {scene_name} ({yaml_file.name})")

        if not self.prompts_cache:
            logger.warning(f"No prompt files found in {self.prompts_dir}")

    def get_prompt(self, scene: str, template_name: str = "default") -> Optional[str]:
        """Return the raw template for a scene, or None if it is not defined."""
        scene_prompts = self.prompts_cache.get(scene)
        if not scene_prompts:
            logger.warning(f"No prompts configured for scene '{scene}'")
            return None

        templates = scene_prompts.get("templates", {}) or {}
        prompt_template = templates.get(template_name)
        if not prompt_template:
            logger.warning(f"Template '{template_name}' not found in scene '{scene}'")
            return None

        return prompt_template

    def format_prompt(self, scene: str, template_name: str = "default", **kwargs) -> Optional[str]:
        """Render a template with str.format; None if the template is missing or broken."""
        template = self.get_prompt(scene, template_name)
        if not template:
            return None

        try:
            return template.format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            logger.error(f"Failed to format prompt template {scene}/{template_name}: {e}")
            return None

    def get_all_scenes(self) -> list:
        return list(self.prompts_cache.keys())


_prompts_managers: Dict[str, PromptsManager] = {}


def get_prompts_manager(prompts_dir: Optional[str] = None) -> PromptsManager:
    """Shared PromptsManager per prompts directory."""
    key = str(prompts_dir or "")
    if key not in _prompts_managers:
        _prompts_managers[key] = PromptsManager(prompts_dir)
    return _prompts_managers[key]
