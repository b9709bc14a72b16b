"""
Management command to create sample categories, tags and posts
"""

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from core.exceptions import ConflictError
from posts.models import Category, Tag
from posts.services import PostService


SAMPLE_POSTS = [
    {
        'title': 'Getting Started with Django Query Expressions',
        'summary': 'F() and Q() objects turn ad-hoc filters into composable predicates.',
        'content': (
            'Query expressions let the database do the arithmetic. An F() '
            'expression refers to a column, so counters can be updated in a '
            'single statement without reading the row first.'
        ),
        'category': 'Engineering',
        'tags': ['django', 'orm'],
        'status': 'publish',
        'is_recommend': True,
    },
    {
        'title': 'Pagination That Counts',
        'summary': 'Offset pagination with a total that matches the filters.',
        'content': 'Count the filtered queryset first, then slice it.',
        'category': 'Engineering',
        'tags': ['django'],
        'status': 'publish',
    },
    {
        'title': 'Notes for Subscribers',
        'summary': 'Members-only notes.',
        'content': 'This body is only visible with the post password.',
        'category': 'Journal',
        'tags': ['members'],
        'status': 'publish',
        'need_password': True,
        'password': 'letmein',
    },
    {
        'title': 'Unfinished Thoughts',
        'summary': 'A draft that stays out of the archive.',
        'content': 'Work in progress.',
        'category': 'Journal',
        'tags': [],
        'status': 'draft',
    },
]


class Command(BaseCommand):
    help = 'Create sample categories, tags and posts for local development'

    def add_arguments(self, parser):
        parser.add_argument(
            '--author',
            default='editor',
            help='Username of the author (created if missing)',
        )

    def handle(self, *args, **options):
        User = get_user_model()
        author, created = User.objects.get_or_create(username=options['author'])
        if created:
            author.set_unusable_password()
            author.save()
            self.stdout.write(self.style.SUCCESS(f'Created author: {author.username}'))

        for sample in SAMPLE_POSTS:
            category, _ = Category.objects.get_or_create(name=sample['category'])
            tags = [Tag.objects.get_or_create(name=name)[0] for name in sample['tags']]

            data = {key: value for key, value in sample.items() if key not in ('category', 'tags')}
            data['category'] = category.pk
            data['tags'] = [tag.pk for tag in tags]

            try:
                post_id = PostService.create(author, data)
            except ConflictError:
                self.stdout.write(self.style.WARNING(f'Exists: {sample["title"]}'))
                continue
            self.stdout.write(self.style.SUCCESS(f'Created: {sample["title"]} ({post_id})'))
