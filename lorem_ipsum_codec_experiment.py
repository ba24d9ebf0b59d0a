import time

from huffcodec.codecs import Container, HuffmanCodec
from huffcodec.logger import Logger
from huffcodec.performance_display import PerformanceDisplay
from huffcodec.settings import TEXT_CODER_CODE, PACKED_CODER_CODE

lorem_ipsum_1par = "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Donec a consectetur ligula. Nunc erat dolor, tristique sed sagittis quis, dignissim eget erat. Vivamus enim lorem, finibus sit amet maximus eget, condimentum sit amet massa. Fusce aliquet velit sit amet ex pretium, ut tincidunt dolor semper. Nulla pellentesque eget massa quis rhoncus. Curabitur maximus quis mauris vel sollicitudin. Integer tristique ut nisl sed consequat. Donec a ipsum ut sem cursus ullamcorper. Sed finibus, sapien id volutpat tempus, turpis odio placerat purus, sit amet scelerisque nibh sem a magna. Sed justo sem, facilisis at imperdiet eu, tincidunt vel quam. Ut id sollicitudin eros, sit amet bibendum tortor. Lorem ipsum dolor sit amet, consectetur adipiscing elit."

def main():
    lorem_ipsum_bytes = str.encode(lorem_ipsum_1par)
    print(f"Size of original data: {len(lorem_ipsum_bytes)}")

    codec = HuffmanCodec()
    logger = Logger()
    for name, coder_code in (("text", TEXT_CODER_CODE), ("packed", PACKED_CODER_CODE)):
        start = time.time()
        compressed_data = Container.serialize(codec.compress(lorem_ipsum_bytes, coder_code, logger=logger))
        print(f"Size of {name} compressed data: {len(compressed_data)} ({time.time() - start:.4f}s)")
        decompressed_data = codec.decompress(Container.deserialize(compressed_data), logger=logger)

        if lorem_ipsum_bytes == decompressed_data:
            print("Data integrity preserved.")
        else:
            print("Data integrity compromised.")

    pm = PerformanceDisplay(logger.logs)
    pm.generate_code_length_plot(show_graphs=True)
    pm.generate_compression_ratio_plot(show_graphs=True)

if __name__ == "__main__":
    main()
