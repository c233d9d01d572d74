# payresources

Typed building blocks for working with a payments API. The package uses only
the standard library.

## What is in it

| Module | Contents |
| --- | --- |
| `payresources.currency` | `Currency`, `ParseCurrencyError` |
| `payresources.card` | `CardBrand`, `CardType` |
| `payresources.bank_account` | `BankAccountStatus` |
| `payresources.api_types` | `ApiVersion`, `DelayDays`, `Scheduled`, `UpTo`, `PaymentIntentOffSession` and their keyword enums |
| `payresources.statuses` | `TokenType`, `WebhookEndpointStatus`, `OrderStatusFilter`, `ReviewReason` |
| `payresources.issuing` | `MerchantCategory`, `MerchantData`, authorization, card, dispute and transaction enums |
| `payresources.balance` | `BalanceTransactionStatus`, `FeeType` |
| `payresources.sources` | `SourceStatus`, `SourceUsage`, `SourceRedirectFlowFailureReason`, `SourceRedirectFlowStatus` |
| `payresources.payment_intents` | `PaymentError`, `PaymentErrorType`, `CaptureMethod`, `ConfirmationMethod`, `PaymentIntentNextActionType`, `PaymentIntentMethodType`, and the update, confirm, capture and cancel parameters |
| `payresources.customers` | `CustomerPaymentMethodRetrieval`, `VerifyBankAccount`, and the list, create and update parameters for customer balance transactions |
| `payresources.charges` | `CaptureCharge`, `capture_path()` |
| `payresources.invoices` | `RetrieveUpcomingInvoice`, `SubscriptionItemFilter`, `CreateInvoiceLineItem` |
| `payresources.payment_sources` | `PaymentSourceParams`, `BankAccountParams`, `CardParams`, `AttachPaymentMethod` |
| `payresources.setup_intents` | `ConfirmSetupIntent`, `CancelSetupIntent` |
| `payresources.subscriptions` | `CancelSubscription`, `CreateUsageRecord`, `UsageRecordAction` |
| `payresources.transfers` | `CreateTransferReversal`, `CreateLoginLink` |

- **Enumerations** are `StrEnum`s: each member's value is the exact wire
  string, and `str()` of a member returns it. Several enums provide a
  `default()` class method.
- **Union values** (`DelayDays`, `Scheduled`, `UpTo`,
  `PaymentIntentOffSession`) hold either a number (or flag) or a keyword, and
  convert with `to_json()` and `from_json()`.
- **Parameter objects** are dataclasses that check their fields when built
  and return a dictionary ready to send from `to_params()`. Most leave unset
  fields out; `BankAccountParams` and `CardParams` always include their
  optional fields, as `None` when unset, and tag the result with `object`.

## Installation

```
pip install payresources
```

## Examples

```python
from payresources.currency import Currency, ParseCurrencyError

Currency.parse("eur")      # Currency.EUR
str(Currency.USD)          # "usd"
Currency.default()         # Currency.USD

try:
    Currency.parse("xyz")
except ParseCurrencyError as exc:   # a ValueError
    print(exc)             # unknown currency code
```

Card brands and types that are not recognised parse to `UNKNOWN`. The same
applies to `OTHER` for `PaymentErrorType`, `CaptureMethod`, `ConfirmationMethod`
and `PaymentIntentNextActionType`. Neither case raises an error:

```python
from payresources.card import CardBrand

CardBrand.parse("American Express")  # CardBrand.AMERICAN_EXPRESS
CardBrand.parse("Something New")     # CardBrand.UNKNOWN
```

An `OTHER` member cannot be put in a request. `PaymentError.to_dict()` raises
`ValueError` for it, and so does a parameter object's `to_params()`.

Union values:

```python
from payresources.api_types import DelayDays, UpTo

DelayDays.days(7).to_json()        # 7
DelayDays.minimum().to_json()      # "minimum"
UpTo.from_json("inf") == UpTo.now()   # True
DelayDays.from_json("soon")        # raises ValueError
```

Request parameters:

```python
from payresources.charges import CaptureCharge, capture_path

params = CaptureCharge(amount=1000, receipt_email="buyer@example.com")
params.to_params()       # {"amount": 1000, "receipt_email": "buyer@example.com"}
capture_path("ch_123")   # "/charges/ch_123/capture"

CaptureCharge(amount=-1) # raises ValueError: amount out of range
```

```python
from payresources.customers import ListCustomerBalanceTransactions

listing = ListCustomerBalanceTransactions(limit=10)
listing.set_last("cbtxn_123")
listing.to_params()      # {"limit": 10, "starting_after": "cbtxn_123"}
```

## What it does not do

This package has no HTTP client. It makes no requests and handles no API
keys or responses beyond the value types above. You build the parameters
with it, and you send them with a client of your choice. The only request
path it provides is `capture_path()`.

## Running the tests

```
pip install -e .[test]
pytest
```