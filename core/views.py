from django.shortcuts import render

from .loaders import HomeRequestContext, load_home_page


def home(request):
    """Landing page: booking card plus the recommended and popular carousels"""
    page_context = HomeRequestContext.from_request(request)
    page = load_home_page(page_context)

    context = {
        'page': page,
        'search_query': page_context.search_query,
    }
    return render(request, 'core/home.html', context)
