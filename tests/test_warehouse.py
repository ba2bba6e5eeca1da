from rotalog.structures import Package
from rotalog.warehouse import MAX_PACKAGES_PER_SECTION, Warehouse


def _package(package_id, route):
    return Package(package_id, 0, route[-1], 0.0, route)


def test_sections_follow_neighbours():
    warehouse = Warehouse(0, [1, 3])
    assert [section.destination for section in warehouse.sections] == [1, 3]
    assert not warehouse.has_packages()


def test_receive_places_package_in_next_hop_section():
    warehouse = Warehouse(0, [1, 3])
    package = _package(4, [3, 5])
    assert warehouse.receive(package)
    assert warehouse.sections[1].packages == [package]
    assert warehouse.sections[0].packages == []
    assert warehouse.has_packages()


def test_receive_without_matching_section_is_rejected():
    warehouse = Warehouse(0, [1])
    assert not warehouse.receive(_package(1, [2]))
    assert not warehouse.has_packages()


def test_take_for_transport_returns_top_first_and_empties():
    warehouse = Warehouse(0, [1])
    packages = [_package(i, [1]) for i in range(3)]
    for package in packages:
        warehouse.receive(package)
    taken = warehouse.take_for_transport(1)
    assert taken == packages[::-1]
    assert warehouse.take_for_transport(1) == []
    assert not warehouse.has_packages()


def test_take_for_unknown_destination_is_empty():
    warehouse = Warehouse(0, [1])
    warehouse.receive(_package(0, [1]))
    assert warehouse.take_for_transport(9) == []
    assert warehouse.has_packages()


def test_section_capacity_is_bounded():
    warehouse = Warehouse(0, [1])
    results = [warehouse.receive(_package(i, [1])) for i in range(MAX_PACKAGES_PER_SECTION + 1)]
    assert all(results[:-1])
    assert results[-1] is False
    assert len(warehouse.take_for_transport(1)) == MAX_PACKAGES_PER_SECTION