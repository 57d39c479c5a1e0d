from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class ShelfmanConfig(AppConfig):
    name = "shelfman"
    verbose_name = _("Product Catalogue")
