from .confirm import Confirm
from .input import Input
from .password import Password
from .select import Item, MultiSelect, Select

__all__ = ["Confirm", "Input", "Item", "MultiSelect", "Password", "Select"]
