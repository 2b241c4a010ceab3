from django.apps import AppConfig


class StringAnalyserConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'String_Analyser'
    verbose_name = 'String Analyser'
