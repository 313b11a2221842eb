from __future__ import annotations

import threading

import pytest

from domain_validator.validator import DomainValidator, is_valid, is_valid_label, split_labels


@pytest.fixture()
def validator() -> DomainValidator:
    return DomainValidator.get_instance()


@pytest.mark.parametrize(
    "domain",
    [
        "apache.org",
        "www.google.com",
        "test-domain.com",
        "test---domain.com",
        "test-d-o-m-ain.com",
        "as.uk",
        "ApAchE.Org",
        "z.com",
        "i.have.an-example.domain.name",
        "www.xn--bcher-kva.ch",
        "1.in-addr.arpa",
        "example.company",
        "example.ltd",
        "example.bank",
        "example.google",
        "example.agency",
    ],
)
def test_valid_domains(validator: DomainValidator, domain: str) -> None:
    assert validator.is_valid(domain)


@pytest.mark.parametrize(
    "domain",
    [
        ".org",
        " apache.org ",
        "apa che.org",
        "apache.org\n",
        "-testdomain.name",
        "testdomain-.name",
        "---c.com",
        "c--.com",
        "www.-example.com",
        "example.com-",
        "apache.rog",
        "http://www.apache.org",
        "apache..org",
        "apache.org.",
        "bad_name.com",
        "bücher.ch",
        " ",
        "",
        None,
        ".nope",
        123,
    ],
)
def test_invalid_domains(validator: DomainValidator, domain: object) -> None:
    assert not validator.is_valid(domain)


def test_label_length_cap() -> None:
    assert DomainValidator.get_instance().is_valid("a" * 63 + ".com")
    assert not DomainValidator.get_instance().is_valid("a" * 64 + ".com")


def test_domain_length_cap() -> None:
    name = ".".join(["a" * 63] * 3 + ["b" * 58]) + ".com"
    assert len(name) == 254
    assert not is_valid(name)
    assert is_valid(name[2:])


def test_case_permutations_agree() -> None:
    for candidate in ("example.com", "EXAMPLE.COM", "eXaMpLe.CoM"):
        assert is_valid(candidate)


def test_get_instance_is_cached_per_policy() -> None:
    assert DomainValidator.get_instance() is DomainValidator.get_instance(False)
    assert DomainValidator.get_instance(True) is DomainValidator.get_instance(allow_local=True)
    assert DomainValidator.get_instance(False) != DomainValidator.get_instance(True)
    assert DomainValidator.get_instance(False) == DomainValidator(allow_local=False)


def test_get_instance_concurrent_first_access(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(DomainValidator, "_instances", {})
    barrier = threading.Barrier(8)
    seen: list[DomainValidator] = []
    seen_lock = threading.Lock()

    def worker() -> None:
        barrier.wait()
        inst = DomainValidator.get_instance(True)
        with seen_lock:
            seen.append(inst)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(seen) == 8
    assert all(inst is seen[0] for inst in seen)


def test_allow_local() -> None:
    no_local = DomainValidator.get_instance(False)
    allow_local = DomainValidator.get_instance(True)

    assert not no_local.is_valid("localhost.localdomain")
    assert not no_local.is_valid("localhost")

    assert allow_local.is_valid("localhost.localdomain")
    assert allow_local.is_valid("localhost")
    assert allow_local.is_valid("hostname")
    assert allow_local.is_valid("machinename")
    assert allow_local.is_valid("db01.localhost")

    assert allow_local.is_valid("apache.org")
    assert not allow_local.is_valid(" apache.org ")
    assert not allow_local.is_valid("-hostname")
    assert not allow_local.is_valid("apache.rog")
    assert not allow_local.is_valid("")


def test_tld_passthroughs_ignore_policy() -> None:
    for inst in (DomainValidator.get_instance(False), DomainValidator.get_instance(True)):
        assert inst.is_valid_infrastructure_tld(".arpa")
        assert not inst.is_valid_infrastructure_tld(".com")
        assert inst.is_valid_generic_tld(".name")
        assert not inst.is_valid_generic_tld(".us")
        assert inst.is_valid_country_code_tld(".uk")
        assert not inst.is_valid_country_code_tld(".org")
        assert inst.is_valid_generic_restricted_tld(".pro")
        assert inst.is_valid_tld(".COM")
        assert inst.is_valid_tld(".BiZ")
        assert not inst.is_valid_tld("localdomain")
        assert inst.is_valid_local_tld("localdomain")


def test_split_labels() -> None:
    assert split_labels("www.Example.com") == ["www", "Example", "com"]
    assert split_labels("a..b") is None
    assert split_labels("exa_mple.com") is None


def test_is_valid_label() -> None:
    assert is_valid_label("xn--bcher-kva")
    assert is_valid_label("a")
    assert not is_valid_label("")
    assert not is_valid_label("-a")
    assert not is_valid_label("a-")
