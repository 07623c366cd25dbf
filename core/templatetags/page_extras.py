from django import template

register = template.Library()


@register.inclusion_tag('core/partials/booking_item.html')
def booking_item(service_name, barbershop_name, barbershop_image_url, date):
    """Upcoming booking card"""
    return {
        'service_name': service_name,
        'barbershop_name': barbershop_name,
        'barbershop_image_url': barbershop_image_url,
        'date': date,
    }


@register.inclusion_tag('core/partials/barbershop_item.html')
def barbershop_item(barbershop):
    """Carousel card for one barbershop, keyed by its id"""
    return {
        'barbershop': barbershop,
        'key': str(barbershop.pk),
    }
