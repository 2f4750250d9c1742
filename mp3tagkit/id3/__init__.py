"""ID3v1 and ID3v2 tag formats: headers, frames, mappings, readers and writers."""