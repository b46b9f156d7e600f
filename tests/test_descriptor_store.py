from tfa.modules.artifactfetch.domain import SidecarDescriptor
from tfa.modules.artifactfetch.state import DescriptorStore

DESCRIPTOR = SidecarDescriptor(
    groupid="org.cccs.jslibs",
    artifactid="jquery.collapsible",
    version="1.0.0",
    file_name="jquery.collapsible-1.0.0.js",
    url="http://example.test/files/jquery.collapsible-1.0.0.js",
)


def test_write_if_absent_is_write_once(tmp_path):
    store = DescriptorStore("tfa")
    storage = tmp_path / ".state"

    assert store.write_if_absent(DESCRIPTOR, storage) is True
    sidecar = storage / "jquery.collapsible-1.0.0.js.tfa"
    first = sidecar.read_text(encoding="utf-8")

    changed = SidecarDescriptor(**{**DESCRIPTOR.__dict__, "url": "http://elsewhere.test/x.js"})
    assert store.write_if_absent(changed, storage) is False
    assert sidecar.read_text(encoding="utf-8") == first


def test_sidecar_lines_are_in_fixed_order(tmp_path):
    store = DescriptorStore()
    store.write_if_absent(DESCRIPTOR, tmp_path)

    lines = (tmp_path / "jquery.collapsible-1.0.0.js.tfa").read_text(encoding="utf-8").splitlines()

    assert lines == [
        "groupId=org.cccs.jslibs",
        "artefactId=jquery.collapsible",
        "version=1.0.0",
        "fileName=jquery.collapsible-1.0.0.js",
        "url=http://example.test/files/jquery.collapsible-1.0.0.js",
    ]


def test_read_and_list_descriptors(tmp_path):
    store = DescriptorStore(".meta")
    store.write_if_absent(DESCRIPTOR, tmp_path)
    (tmp_path / "broken.js.meta").write_text("groupId=only\n", encoding="utf-8")
    (tmp_path / "unrelated.txt").write_text("x=y\n", encoding="utf-8")

    assert store.read(tmp_path / "jquery.collapsible-1.0.0.js.meta") == DESCRIPTOR
    assert store.list_descriptors(tmp_path) == [DESCRIPTOR]
    assert store.list_descriptors(tmp_path / "absent") == []
