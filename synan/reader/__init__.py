from synan.reader.tagged import from_tagged
