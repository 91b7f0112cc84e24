"""
Form state for creating or editing one record.
"""


class FormController:
    """Draft, touched fields and validation for one record of a given kind.

    The client and notifier are passed in so pages can use the real backend
    and flash messages while tests use fakes. Submissions are single-flight:
    submit() does nothing while a previous submit is still in progress.
    """

    def __init__(self, kind, client, notifier, existing=None, on_success=None):
        self.kind = kind
        self.client = client
        self.notifier = notifier
        self.existing = existing
        self.on_success = on_success
        self.values = kind.initial_values(existing)
        self.touched = set()
        self.submitting = False
        self._errors = kind.validate(self.values)

    @property
    def is_editing(self):
        return self.existing is not None

    @property
    def errors(self):
        return dict(self._errors)

    @property
    def visible_errors(self):
        """Errors for fields the user has interacted with"""
        return {name: message for name, message in self._errors.items() if name in self.touched}

    @property
    def is_valid(self):
        return not self._errors

    def set_field(self, name, value):
        if name not in self.values:
            raise KeyError(f"{self.kind.name} has no field '{name}'")
        self.values[name] = value
        message = self.kind.validate_field(name, value)
        if message:
            self._errors[name] = message
        else:
            self._errors.pop(name, None)

    def set_fields(self, values):
        for name, value in values.items():
            self.set_field(name, value)

    def mark_touched(self, name):
        if name not in self.values:
            raise KeyError(f"{self.kind.name} has no field '{name}'")
        self.touched.add(name)

    def payload(self):
        return {name: self.values[name] for name in self.kind.fields}

    def reset(self):
        self.values = self.kind.initial_values()
        self.touched = set()
        self._errors = self.kind.validate(self.values)

    def submit(self):
        """Validate and send the draft.

        Returns the ApiResult of the backend call, or None when nothing was
        sent (already submitting, or the draft is invalid).
        """
        if self.submitting:
            return None

        self._errors = self.kind.validate(self.values)
        if not self.is_valid:
            self.touched.update(self.kind.fields)
            return None

        self.submitting = True
        try:
            record_id = self.existing.id if self.is_editing else None
            result = self.client.submit(self.kind, self.payload(), record_id=record_id)
        finally:
            self.submitting = False

        if not result.ok:
            self.notifier.error(result.message)
            return result

        if self.is_editing:
            self.notifier.success(self.kind.message('updated'))
        else:
            self.notifier.success(self.kind.message('created'))
            self.reset()

        if self.on_success:
            self.on_success(result)
        return result
