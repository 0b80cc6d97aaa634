__version__ = "0.1.0"
__app_name__ = "say-cli"
__description__ = "Human-scannable status lines and banners for long-running console tasks"
__author__ = "Say Contributors"
__license__ = "MIT"

from say.utils.config import MAX_COLUMNS
from say.core.interpolation_template import InterpolationTemplate
from say.core.justifiers import CenterJustifier, LeftJustifier, RightJustifier
from say.core import banner_generator, template_builder
from say.say import Say, default_say
