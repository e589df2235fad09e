from .translation_manager import TranslationManager
from .translators import AdvancedTranslator, BasicTranslator, Translator, create_translator

__all__ = ['TranslationManager', 'Translator', 'BasicTranslator', 'AdvancedTranslator', 'create_translator']
