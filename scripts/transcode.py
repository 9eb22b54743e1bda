#!/usr/bin/env python3
'''
Convert a file of records between the binary and the text representation.

 $ transcode.py binary text "u32 str:16 bits:10" records.bin records.txt --header "# generated"
'''
import sys

from streamformat.transcode import main


if __name__ == '__main__':
    sys.exit(main())
