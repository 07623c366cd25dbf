from django.contrib import admin
from .models import Barbershop, BarbershopService


class BarbershopServiceInline(admin.TabularInline):
    model = BarbershopService
    extra = 0
    fields = ('name', 'price', 'description', 'image_url')


@admin.register(Barbershop)
class BarbershopAdmin(admin.ModelAdmin):
    list_display = ('name', 'address', 'created_at')
    search_fields = ('name', 'address')
    ordering = ('name',)
    readonly_fields = ('id', 'created_at', 'updated_at')
    inlines = [BarbershopServiceInline]


@admin.register(BarbershopService)
class BarbershopServiceAdmin(admin.ModelAdmin):
    list_display = ('name', 'barbershop', 'price')
    search_fields = ('name', 'barbershop__name')
    list_filter = ('barbershop',)
