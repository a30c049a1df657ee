# savvyshopper

Look up a product at Amazon and Walmart at the same time. The cheapest
offers are shown side by side in your terminal.

## Installation

```
pip install .
```

## Usage

The command refuses to run unless the `ZINC_API_KEY` environment variable
is set to a non-empty value:

```
export ZINC_API_KEY=placeholder
savvyshopper "usb-c cable"
```

If no product is given on the command line, you are prompted for one. The
prompt takes a single word. Empty input or more than one word is an error.

```
savvyshopper
Enter product: headphones
```

You can also start the command with `python -m savvyshopper.runner`.

Both retailers are queried concurrently. The command takes up to three
offers from each retailer and keeps at most six in total. It prints them
sorted by price, cheapest first:

```
Title        Price   Retailer  URL
Short Title  $10.99  Amazon    https://example.com/1
...
```

Titles longer than 60 characters are cut short. The whole search is limited
to two seconds. A single retailer request is retried up to three times, with
waits of 0.1 s and then 0.2 s between tries.

### Errors

- A missing `ZINC_API_KEY` prints an authentication error.
- A retailer that answers with status 401 gives an authentication error.
- A retailer that cannot be reached, answers with another non-200 status or
  sends a reply that cannot be read gives a network error. The same happens
  when the search runs out of time or an offer has a negative price.
- A search where neither retailer returns an offer prints
  "No results found."

In each of these cases the command exits with status 1. It also exits with
status 1 when the prompted input cannot be read.

## What it does not do

The API key is only checked for presence. It is not sent with the search
requests, which carry no authorization header. If the key has the special
value `mock-api-key-for-testing`, `savvyshopper.config.api_key()` returns
`"mock-data"`, but the command still searches the live endpoints. It has no
offline mode.

## Using it from Python

```python
import sys

from savvyshopper.price import search_prices
from savvyshopper.render import table

offers = search_prices("usb-c cable")
table(sys.stdout, offers)
```

`search_prices` also accepts a mapping from `Retailer` to any object with a
`search(query)` method that returns a list of `Offer`. Use it to query
other endpoints, for example through `amazon_searcher(endpoint)` or
`walmart_searcher(endpoint)`, or to supply fixed offers:

```python
from savvyshopper.domain import Offer, Retailer
from savvyshopper.price import search_prices


class Fixed:
    def __init__(self, offers):
        self.offers = offers

    def search(self, query):
        return self.offers


offers = search_prices(
    "cable",
    {
        Retailer.AMAZON: Fixed([Offer("Cable", 9.99, "https://example.com/a")]),
        Retailer.WALMART: Fixed([Offer("Cable", 7.49, "https://example.com/w")]),
    },
)
```

`savvyshopper.runner.run(args, out, searchers)` runs the whole command. It
writes to any text stream and accepts the same mapping. It raises the error
after printing its message.

`savvyshopper.config.mock_data(path)` loads offers from a JSON file of the
form `{"offers": [{"Title": ..., "Price": ..., "URL": ..., "Retailer": ...}]}`.
The path defaults to `mock_data.json` in the current directory.

The errors live in `savvyshopper.domain`. `NetworkError`, `AuthError` and
`NoResultsError` all derive from `ShopperError`.

## Development

```
pip install -e ".[test]"
pytest
```