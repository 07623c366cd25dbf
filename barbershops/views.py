from django.shortcuts import render, get_object_or_404

from .models import Barbershop


def barbershop_detail(request, pk):
    """Barbershop page with its contact data and the services it offers"""
    barbershop = get_object_or_404(Barbershop, pk=pk)
    services = barbershop.services.all()

    context = {
        'barbershop': barbershop,
        'services': services,
    }
    return render(request, 'barbershops/detail.html', context)
