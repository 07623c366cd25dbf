# core/admin.py
from django.contrib import admin
from django.conf import settings

admin.site.site_header = f"{settings.SITE_NAME} Administração"
admin.site.site_title = f"{settings.SITE_NAME} Admin"
admin.site.index_title = "Painel"
