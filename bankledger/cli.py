"""Text menu front end for the bank ledger."""

import logging

from dotenv import load_dotenv
from tabulate import tabulate

from bankledger.models.exceptions import BankError
from bankledger.repositories.account_store import AccountStore
from bankledger.repositories.ciphers import make_cipher
from bankledger.services.bank_service import BankService
from config.settings import Settings

MENU = """
1. Open Account
2. Balance Enquiry
3. Deposit
4. Withdraw
5. Close Account
6. Show All Accounts
7. Exit"""


class BankMenu:
    """Interactive menu that forwards every choice to a BankService."""

    def __init__(self, bank: BankService, input_fn=input, output_fn=print):
        self.bank = bank
        self._input = input_fn
        self._print = output_fn

    def _ask(self, prompt):
        return self._input(prompt).strip()

    def _ask_account_number(self):
        return int(self._ask('Enter Account Number: '))

    def open_account(self):
        first_name = self._ask('Enter First Name: ')
        last_name = self._ask('Enter Last Name: ')
        balance = self._ask('Enter Initial Balance: ')
        try:
            account = self.bank.open_account(first_name, last_name, balance)
        except (BankError, ValueError) as err:
            self._print('Account creation failed: ' + str(err))
        else:
            self._print('\nAccount created successfully!\n' + str(account))

    def balance_enquiry(self):
        number = self._ask_account_number()
        try:
            account = self.bank.get_account(number)
        except BankError as err:
            self._print('Error: ' + str(err))
            return
        self._print('\nAccount Details:\n' + str(account))
        self._print('\nTransaction History:')
        for transaction in account.history():
            self._print(str(transaction))

    def deposit(self):
        number = self._ask_account_number()
        amount = self._ask('Enter Amount: ')
        try:
            self.bank.deposit(number, amount)
        except (BankError, ValueError) as err:
            self._print('Deposit failed: ' + str(err))
        else:
            self._print('Deposit successful!')

    def withdraw(self):
        number = self._ask_account_number()
        amount = self._ask('Enter Amount: ')
        try:
            self.bank.withdraw(number, amount)
        except (BankError, ValueError) as err:
            self._print('Withdrawal failed: ' + str(err))
        else:
            self._print('Withdrawal successful!')

    def close_account(self):
        number = self._ask_account_number()
        try:
            self.bank.close_account(number)
        except BankError as err:
            self._print('Account closure failed: ' + str(err))
        else:
            self._print('Account closed successfully!')

    def show_all(self):
        accounts = self.bank.list_accounts()
        if not accounts:
            self._print('No accounts.')
            return
        header = ['Account', 'Name', 'Balance']
        rows = [[a.account_number, a.full_name, '${:.2f}'.format(a.balance)] for a in accounts]
        self._print(tabulate([header] + rows, headers='firstrow', stralign='right', numalign='right'))

    def run(self):
        """Loop over the menu until the user exits or input runs out."""
        actions = {
            1: self.open_account,
            2: self.balance_enquiry,
            3: self.deposit,
            4: self.withdraw,
            5: self.close_account,
            6: self.show_all,
        }
        self._print('=== Advanced Banking System ===')
        while True:
            self._print(MENU)
            try:
                choice = int(self._ask('Enter choice: '))
                if choice == 7:
                    self._print('Exiting system...')
                    return
                action = actions.get(choice)
                if action is None:
                    self._print('Invalid choice!')
                    continue
                action()
            except ValueError:
                self._print('Invalid input format!')
            except EOFError:
                return


def setup_logging(settings: Settings) -> None:
    logger = logging.getLogger('bankledger')
    logger.setLevel(getattr(logging, settings.log_level, logging.INFO))
    handler = logging.FileHandler(filename=settings.log_file, encoding='utf-8', mode='a')
    handler.setFormatter(logging.Formatter('%(asctime)s:%(levelname)s:%(name)s: %(message)s'))
    logger.addHandler(handler)


def main():
    load_dotenv()
    settings = Settings.load()
    setup_logging(settings)

    store = AccountStore(settings.data_file, make_cipher(settings.cipher, settings.cipher_key))
    bank = BankService.from_store(store)
    BankMenu(bank).run()
