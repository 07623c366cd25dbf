import os
import re
from datetime import datetime, timedelta, timezone as dt_timezone
from unittest import mock

from django.conf import settings
from django.contrib.staticfiles import finders
from django.db import DatabaseError
from django.template.loader import get_template
from django.test import Client, RequestFactory, TestCase, override_settings
from django.urls import reverse

from barbershops.models import Barbershop
from core.context_processors import site_settings
from core.loaders import (
    DEFAULT_BOOKING,
    HomeRequestContext,
    fetch_popular,
    fetch_recommended,
    load_home_page,
)

CARD_KEY = re.compile(r'data-key="([^"]+)"')


def make_barbershop(name, **extra):
    defaults = {
        'address': f'Rua {name}, 1',
        'image_url': 'https://example.com/shop.png',
    }
    defaults.update(extra)
    return Barbershop.objects.create(name=name, **defaults)


def section(html, section_id):
    """Markup of one <section> of the home page."""
    start = html.index(f'id="{section_id}"')
    return html[start:html.index('</section>', start)]


class FetchBarbershopsTests(TestCase):

    @classmethod
    def setUpTestData(cls):
        for name in ["Alpha", "Zulu", "Mango"]:
            make_barbershop(name)

    def test_recommended_is_ascending_by_name(self):
        names = [b.name for b in fetch_recommended()]
        self.assertEqual(names, ["Alpha", "Mango", "Zulu"])

    def test_popular_is_descending_by_name(self):
        names = [b.name for b in fetch_popular()]
        self.assertEqual(names, ["Zulu", "Mango", "Alpha"])

    def test_queries_return_whole_collection(self):
        for i in range(25):
            make_barbershop(f"Barbearia {i:02d}")
        total = Barbershop.objects.count()

        recommended = fetch_recommended()
        popular = fetch_popular()

        self.assertEqual(len(recommended), total)
        self.assertEqual(len(popular), total)
        self.assertEqual({b.pk for b in recommended}, {b.pk for b in popular})
        names = [b.name for b in recommended]
        self.assertEqual(names, sorted(names))

    def test_results_are_immutable_sequences(self):
        self.assertIsInstance(fetch_recommended(), tuple)
        self.assertIsInstance(fetch_popular(), tuple)


class LoadHomePageTests(TestCase):

    def setUp(self):
        self.now = datetime(2024, 8, 12, 14, 30, tzinfo=dt_timezone.utc)

    def test_empty_collection(self):
        page = load_home_page(HomeRequestContext(rendered_at=self.now))
        self.assertEqual(page.recommended, ())
        self.assertEqual(page.popular, ())

    def test_booking_is_static_and_stamped_with_render_time(self):
        page = load_home_page(HomeRequestContext(rendered_at=self.now))

        self.assertEqual(page.booking.service_name, "Corte de Cabelo")
        self.assertEqual(page.booking.barbershop_name, "Barbearia do João")
        self.assertTrue(page.booking.barbershop_image_url.startswith("https://"))
        self.assertEqual(page.booking.date, self.now)

    @override_settings(BOOKING_PLACEHOLDER={
        'SERVICE_NAME': 'Barba',
        'BARBERSHOP_NAME': 'Navalha',
        'BARBERSHOP_IMAGE_URL': 'https://example.com/navalha.png',
    })
    def test_booking_placeholder_comes_from_settings(self):
        page = load_home_page(HomeRequestContext(rendered_at=self.now))
        self.assertEqual(page.booking.service_name, 'Barba')
        self.assertEqual(page.booking.barbershop_name, 'Navalha')

    @override_settings(BOOKING_PLACEHOLDER={'SERVICE_NAME': 'Barba'})
    def test_partial_booking_placeholder_keeps_defaults(self):
        page = load_home_page(HomeRequestContext(rendered_at=self.now))
        self.assertEqual(page.booking.service_name, 'Barba')
        self.assertEqual(page.booking.barbershop_name, DEFAULT_BOOKING['BARBERSHOP_NAME'])
        self.assertEqual(page.booking.barbershop_image_url, DEFAULT_BOOKING['BARBERSHOP_IMAGE_URL'])

    def test_database_error_is_logged_and_propagated(self):
        with mock.patch('core.loaders.fetch_popular', side_effect=DatabaseError("db down")):
            with self.assertLogs('core.loaders', level='ERROR') as logs:
                with self.assertRaises(DatabaseError):
                    load_home_page(HomeRequestContext(rendered_at=self.now, path='/'))
        self.assertIn("Failed to load barbershops", logs.output[0])

    def test_context_from_request(self):
        request = RequestFactory().get('/', {'search': '  barba '})
        context = HomeRequestContext.from_request(request)
        self.assertEqual(context.path, '/')
        self.assertEqual(context.search_query, 'barba')
        self.assertIsNotNone(context.rendered_at.tzinfo)


class HomeViewTests(TestCase):

    def setUp(self):
        self.url = reverse('core:home')

    def test_empty_collection_renders_without_cards(self):
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, 'core/home.html')
        html = response.content.decode()
        self.assertEqual(CARD_KEY.findall(section(html, 'recommended')), [])
        self.assertEqual(CARD_KEY.findall(section(html, 'popular')), [])

    def test_page_layout_order(self):
        response = self.client.get(self.url)
        html = response.content.decode()

        markers = [
            'class="site-header"',
            'class="search-input"',
            'alt="Agende agora!"',
            'Agendamentos',
            'Recomendados',
            'Populares',
            'class="site-footer"',
        ]
        positions = [html.index(marker) for marker in markers]
        self.assertEqual(positions, sorted(positions))
        self.assertContains(response, 'core/images/banner.svg')
        self.assertContains(response, 'sizes="100vw"')

    def test_carousels_render_both_orders(self):
        shops = {name: make_barbershop(name) for name in ["Alpha", "Zulu", "Mango"]}

        html = self.client.get(self.url).content.decode()

        recommended_keys = CARD_KEY.findall(section(html, 'recommended'))
        popular_keys = CARD_KEY.findall(section(html, 'popular'))
        self.assertEqual(recommended_keys, [str(shops[n].pk) for n in ["Alpha", "Mango", "Zulu"]])
        self.assertEqual(popular_keys, [str(shops[n].pk) for n in ["Zulu", "Mango", "Alpha"]])

    def test_two_queries_per_request(self):
        for name in ["Alpha", "Zulu", "Mango"]:
            make_barbershop(name)

        with self.assertNumQueries(2):
            response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)

    def test_two_queries_per_request_with_empty_collection(self):
        with self.assertNumQueries(2):
            response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)

    def test_card_keys_are_stable_across_requests(self):
        for name in ["Alpha", "Zulu", "Mango"]:
            make_barbershop(name)

        first = CARD_KEY.findall(self.client.get(self.url).content.decode())
        second = CARD_KEY.findall(self.client.get(self.url).content.decode())

        self.assertEqual(len(first), 6)
        self.assertEqual(first, second)

    def test_card_links_to_barbershop_page(self):
        shop = make_barbershop("Alpha")
        response = self.client.get(self.url)
        self.assertContains(response, shop.get_absolute_url(), count=2)
        self.assertContains(response, 'Reservar', count=2)

    def test_booking_card_uses_request_time(self):
        first_at = datetime(2024, 8, 12, 17, 30, 0, tzinfo=dt_timezone.utc)
        second_at = first_at + timedelta(seconds=1)

        with mock.patch('core.loaders.timezone.now', return_value=first_at):
            first = self.client.get(self.url)
        with mock.patch('core.loaders.timezone.now', return_value=second_at):
            second = self.client.get(self.url)

        self.assertContains(first, 'Corte de Cabelo')
        self.assertContains(first, 'Barbearia do João')
        self.assertEqual(first.context['page'].booking.date, first_at)
        self.assertEqual(second.context['page'].booking.date, second_at)
        self.assertNotEqual(
            re.search(r'<time[^>]*datetime="([^"]+)"', first.content.decode()).group(1),
            re.search(r'<time[^>]*datetime="([^"]+)"', second.content.decode()).group(1),
        )

    def test_search_query_prefills_input_without_filtering(self):
        for name in ["Alpha", "Zulu"]:
            make_barbershop(name)

        response = self.client.get(self.url, {'search': 'Alpha'})

        self.assertContains(response, 'value="Alpha"')
        self.assertEqual(len(CARD_KEY.findall(response.content.decode())), 4)

    def test_query_failure_fails_whole_request(self):
        make_barbershop("Alpha")

        with mock.patch('core.loaders.fetch_recommended', side_effect=DatabaseError("db down")):
            with self.assertLogs('core.loaders', level='ERROR'):
                with self.assertRaises(DatabaseError):
                    self.client.get(self.url)

    def test_query_failure_returns_server_error_without_partial_page(self):
        make_barbershop("Alpha")
        client = Client(raise_request_exception=False)

        with mock.patch('core.loaders.fetch_popular', side_effect=DatabaseError("db down")):
            with self.assertLogs('core.loaders', level='ERROR'):
                response = client.get(self.url)

        self.assertEqual(response.status_code, 500)
        self.assertNotIn(b'Recomendados', response.content)
        self.assertNotIn(b'data-key=', response.content)


class SiteSettingsTests(TestCase):

    @override_settings(SITE_NAME='Barbearia Teste')
    def test_site_name_reaches_header_and_footer(self):
        request = RequestFactory().get('/')
        self.assertEqual(site_settings(request), {'SITE_NAME': 'Barbearia Teste'})

        html = self.client.get(reverse('core:home')).content.decode()
        header = html[html.index('class="site-header"'):html.index('</header>')]
        footer = html[html.index('class="site-footer"'):html.index('</footer>')]
        self.assertIn('Barbearia Teste', header)
        self.assertIn('Barbearia Teste', footer)


class ProjectLayoutTests(TestCase):

    def test_shared_assets_ship_inside_core(self):
        base = get_template('base.html')
        self.assertTrue(base.origin.name.endswith(os.path.join('core', 'templates', 'base.html')))
        self.assertIsNotNone(finders.find('core/images/banner.svg'))
        self.assertIsNotNone(finders.find('core/css/site.css'))

    def test_installed_apps(self):
        local_apps = [app for app in settings.INSTALLED_APPS if not app.startswith('django.')]
        self.assertEqual(local_apps, ['core', 'barbershops'])
        self.assertNotIn('django.contrib.humanize', settings.INSTALLED_APPS)
