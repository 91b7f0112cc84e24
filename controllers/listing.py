"""
Paginated, filtered record lists with page-local search.
"""
from .form import FormController

LOADING = 'loading'
LOADED = 'loaded'
ERROR = 'error'


class ListController:
    """One page of a kind's records, as the backend filters and paginates them.

    admin=False lists the signed-in user's own records; admin=True lists
    everyone's and reveals author identity. Search only narrows the page
    that is already loaded.
    """

    def __init__(self, kind, client, notifier, admin=False):
        self.kind = kind
        self.client = client
        self.notifier = notifier
        self.admin = admin
        self.state = LOADING
        self.records = []
        self.page = 1
        self.total_pages = 1
        self.filters = {name: None for name in kind.filters}
        self.search_text = ''

    def load(self):
        self.state = LOADING
        result = self.client.list_records(self.kind, admin=self.admin, page=self.page, **self.filters)

        if not result.ok:
            # Keep the last good page on screen
            self.notifier.error(result.message)
            self.state = ERROR
            return False

        items = result.data.get(self.kind.collection_key)
        if items is None:
            items = []
        if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
            print(f"[Backend] Malformed {self.kind.collection_key} list in response")
            self.notifier.error(self.kind.message('fetch_failed'))
            self.state = ERROR
            return False

        self.records = [self.kind.record_from_api(item) for item in items]
        try:
            self.total_pages = max(1, int(result.data.get('totalPages') or 1))
        except (TypeError, ValueError):
            self.total_pages = 1
        self.state = LOADED
        return True

    def restore(self, page=1, search='', **filters):
        """Take page, search text and filters from request arguments without fetching"""
        for name, value in filters.items():
            if name in self.filters:
                self.filters[name] = value if value not in ('', None) else None
        self.page = max(1, page)
        self.search_text = search or ''

    def open(self, page=1, search='', **filters):
        """First load from request arguments; the page is clamped once the total is known"""
        self.restore(page, search, **filters)
        loaded = self.load()
        if loaded and self.page > self.total_pages:
            return self.set_page(self.total_pages)
        return loaded

    def _fetch(self, page, filters):
        """Load page with filters; a failed load leaves the last good page and filters in place"""
        previous = self.page, self.filters
        self.page, self.filters = page, filters
        if self.load():
            return True
        self.page, self.filters = previous
        return False

    def set_filter(self, **filters):
        updated = dict(self.filters)
        for name, value in filters.items():
            if name not in updated:
                raise KeyError(f"{self.kind.name} lists cannot be filtered by '{name}'")
            updated[name] = value if value not in ('', None) else None
        return self._fetch(1, updated)

    def set_page(self, page):
        return self._fetch(max(1, min(int(page), self.total_pages)), self.filters)

    @property
    def query_args(self):
        """Page, search text and active filters, for links back into this list"""
        args = {'page': self.page}
        if self.search_text:
            args['q'] = self.search_text
        args.update({name: value for name, value in self.filters.items() if value is not None})
        return args

    @property
    def has_previous(self):
        return self.page > 1

    @property
    def has_next(self):
        return self.page < self.total_pages

    def previous_page(self):
        if not self.has_previous:
            return False
        return self.set_page(self.page - 1)

    def next_page(self):
        if not self.has_next:
            return False
        return self.set_page(self.page + 1)

    def search(self, text):
        self.search_text = text or ''
        return self.visible

    @property
    def visible(self):
        needle = self.search_text.lower()
        if not needle:
            return list(self.records)
        return [record for record in self.records
                if any(needle in str(getattr(record, name, '')).lower() for name in self.kind.search_fields)]

    def find(self, record_id):
        for record in self.records:
            if record.id == record_id:
                return record
        return None

    def delete(self, record_id, confirm):
        """Delete a record once confirm() says yes, then reload the page"""
        if not self.kind.deletable:
            raise PermissionError(f"{self.kind.name} records cannot be deleted from the portal")
        if not confirm():
            return False

        result = self.client.delete_record(self.kind, record_id, admin=self.admin)
        if not result.ok:
            self.notifier.error(result.message)
            return False

        self.notifier.success(self.kind.message('deleted'))
        self.load()
        return True

    def edit(self, record):
        """A form pre-filled with record; a successful update reloads the list"""
        return FormController(self.kind, self.client, self.notifier, existing=record,
                              on_success=lambda result: self.load())

    def author_label(self, record):
        if not self.admin:
            return None
        if getattr(record, 'is_anonymous', False):
            return 'Anonymous'
        author = getattr(record, 'author', None)
        if author and author.name:
            return author.name
        return 'Unknown user'
