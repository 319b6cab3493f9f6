import unittest

from rspath import PATH_WORD_FAMILIES, PathWord


class TestPathWords(unittest.TestCase):
    def test_catalog_has_48_distinct_words(self):
        self.assertEqual(len(PathWord), 48)
        self.assertEqual(len({w.value for w in PathWord}), 48)

    def test_families_partition_catalog(self):
        grouped = [w for words in PATH_WORD_FAMILIES.values() for w in words]
        self.assertEqual(len(grouped), 48)
        self.assertEqual(set(grouped), set(PathWord))

        sizes = {name: len(words) for name, words in PATH_WORD_FAMILIES.items()}
        self.assertEqual(sizes["C|CC, CC|C"], 8)
        for name, size in sizes.items():
            if name != "C|CC, CC|C":
                self.assertEqual(size, 4, name)

    def test_words_use_only_path_letters(self):
        for word in PathWord:
            stripped = word.value.replace("pi2", "")
            self.assertTrue(set(stripped) <= set("LSRfbu"), word)
            self.assertEqual(word, PathWord[word.value])


if __name__ == "__main__":
    unittest.main()
