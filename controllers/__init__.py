from .form import FormController
from .listing import ListController, LOADING, LOADED, ERROR

__all__ = ['FormController', 'ListController', 'LOADING', 'LOADED', 'ERROR']
