"""
Example: Cheapest Flights
=========================

WHAT THIS SHOWS:
- Building a network from loader-style tuples
- Direct connections and cheapest-path queries
- Not-found and no-path outcomes as result values
- The action history, newest first

RUN:
    python -m examples.flights.run
"""

from skyroute import FlightNetwork


# ============================================================================
# Loader output: (id, name) cities and (id, id, cost) routes
# ============================================================================

CITIES = [
    (101, "Karachi"),
    (205, "Lahore"),
    (17, "Islamabad"),
    (342, "Quetta"),
    (88, "Peshawar"),
    (999, "Gilgit"),  # no routes: unreachable from everywhere else
]

ROUTES = [
    (101, 205, 120),
    (205, 17, 60),
    (101, 17, 210),
    (101, 342, 90),
    (17, 88, 40),
    (342, 88, 300),
    (88, 555, 10),  # unknown city 555: dropped at load
]


def main() -> None:
    network = FlightNetwork.build(CITIES, ROUTES)

    print("\nCities:")
    for external_id, name in network.list_entities():
        print(f"{external_id} - {name}")

    print("\nFlight Routes:")
    for source, destination, cost in network.list_links():
        print(f"{source} -> {destination} : Cost = {cost}")

    connections = network.direct_connections(101)
    print(f"\nDirect flights available from {connections.city}: {', '.join(connections.connections) or 'None'}")

    # Karachi -> Peshawar costs 220 via Lahore and Islamabad, cheaper than 250 via Islamabad alone
    for source_id, destination_id in [(101, 88), (342, 17), (101, 999), (101, 12345)]:
        result = network.cheapest_path(source_id, destination_id)
        print(f"\n{source_id} -> {destination_id}: {result.summary()}")

    print("\nAction History:")
    for entry in network.log_entries():
        print(f"- {entry}")


if __name__ == "__main__":
    main()
