"""
Examples of using the detconv library

This file demonstrates the main features of detconv:
1. Detecting the encoding of bytes
2. Converting bytes between encodings
3. Getting native text back
4. Converting chunked input
5. Converting files
"""

import os
import tempfile

import detconv


def example_1_basic_detection():
    """Example 1: Basic encoding detection"""
    print("\n" + "=" * 60)
    print("Example 1: Basic Encoding Detection")
    print("=" * 60)

    data = "Hello World! This is UTF-8 text with special chars: áéíóú ñ 你好".encode("utf-8")
    result = detconv.detect(data)
    print(f"\nDetected encoding: {result.encoding} (confidence {result.confidence:.2f})")


def example_2_basic_conversion():
    """Example 2: Basic encoding conversion"""
    print("\n" + "=" * 60)
    print("Example 2: Basic Encoding Conversion")
    print("=" * 60)

    data = "人人生而自由，在尊嚴和權利上一律平等。".encode("big5")
    converted = detconv.convert(data, "gb18030")
    print(f"\nbig5 input:     {data!r}")
    print(f"gb18030 output: {converted!r}")

    try:
        detconv.convert(data, "not-a-real-encoding")
    except detconv.UnsupportedTargetEncoding as e:
        print(f"Unsupported target: {e}")


def example_3_native_text():
    """Example 3: Decoding to str"""
    print("\n" + "=" * 60)
    print("Example 3: Native Text")
    print("=" * 60)

    data = "すべての人間は、生まれながらにして自由である。".encode("shift_jis")
    text = detconv.convert(data, detconv.NATIVE_TEXT)
    print(f"\nDecoded text: {text}")


def example_4_chunked_input():
    """Example 4: Buffering chunks until end of input"""
    print("\n" + "=" * 60)
    print("Example 4: Chunked Input")
    print("=" * 60)

    data = "Texto em português: ação, não, São Paulo".encode("utf-8")
    chunks = [data[i : i + 7] for i in range(0, len(data), 7)]

    buffer = detconv.ConversionBuffer("latin-1")
    for chunk in chunks:
        buffer.feed(chunk)
    print(f"\n{len(chunks)} chunks -> {buffer.finalize()!r}")

    for converted in detconv.convert_stream(chunks, detconv.NATIVE_TEXT):
        print(f"convert_stream: {converted}")


def example_5_files():
    """Example 5: Analysing and converting files"""
    print("\n" + "=" * 60)
    print("Example 5: Files")
    print("=" * 60)

    with tempfile.NamedTemporaryFile(mode="wb", delete=False, suffix=".txt") as f:
        f.write("Café, São Paulo, naïve\r\nSegunda linha\r\n".encode("utf-8"))
        temp_file = f.name

    try:
        result = detconv.analyse(temp_file)
        print(f"\nEncoding: {result.encoding}, newlines: {result.newlines}")

        detconv.convert_file(temp_file, encoding="latin-1", newlines="LF")
        with open(temp_file, "rb") as f:
            print(f"Converted in place: {f.read()!r}")
    finally:
        os.unlink(temp_file)


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("DETCONV LIBRARY - USAGE EXAMPLES")
    print("=" * 60)

    example_1_basic_detection()
    example_2_basic_conversion()
    example_3_native_text()
    example_4_chunked_input()
    example_5_files()

    print("\n" + "=" * 60)
    print("All examples completed successfully!")
    print("=" * 60 + "\n")
