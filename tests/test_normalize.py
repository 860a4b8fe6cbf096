from imgclassify.core.normalize import normalize_label

def test_negative_becomes_unclassified():
    assert normalize_label("negative", 0.97) == ("unclassified", 0.0)
    assert normalize_label("Negative", None) == ("unclassified", 0.0)

def test_other_labels_untouched():
    assert normalize_label("cat", 0.8) == ("cat", 0.8)
    assert normalize_label("non-negative", 0.4) == ("non-negative", 0.4)
